"""Render parsed records as copy-friendly HTML tables.

Every form becomes two stacked cells: the pointed and unpointed Hebrew on
top, and below it the transliteration with the stressed vowel in bold.
"""

import time
from html import escape
from typing import List, Optional, Set, Tuple

from pealim.output.styles import (
    BINYAN_CELL,
    HEBREW_FIRST_ROW,
    MEANING_CELL,
    PATTERN_CELL,
    PERSON_CELL,
    ROOT_CELL,
    ROOT_LINK,
    TRANSLITERATION_ROW,
)
from pealim.schema import (
    EMPTY_FORM,
    GENDER_MASCULINE,
    AdjectiveResult,
    Form,
    NounResult,
    PartOfSpeechRecord,
    Variant,
    VerbResult,
)


def format_transliteration(transliteration: str, stress_offset: int) -> str:
    """Escape a transliteration and bold the character at stress_offset."""
    if not transliteration or stress_offset < 0 or stress_offset >= len(transliteration):
        return escape(transliteration)
    before = transliteration[:stress_offset]
    accented = transliteration[stress_offset]
    after = transliteration[stress_offset + 1:]
    return f"{escape(before)}<b>{escape(accented)}</b>{escape(after)}"


def _hebrew_key(variant: Variant) -> str:
    if variant.pointed and variant.unpointed:
        return f"{variant.pointed} — {variant.unpointed}"
    return variant.pointed or variant.unpointed


def format_hebrew_cell(form: Form) -> Tuple[str, str]:
    """Return (hebrew_row, transliteration_row) markup for a form and its variations.

    A Hebrew spelling already shown in the cell is not repeated, but every
    transliteration is.
    """
    hebrew_parts: List[str] = []
    transliteration_parts: List[str] = []
    seen: Set[str] = set()

    for variant in (form,) + tuple(form.variations):
        key = _hebrew_key(variant)
        if key and key not in seen:
            hebrew_parts.append(escape(key))
            seen.add(key)
        if variant.transliteration:
            transliteration_parts.append(format_transliteration(variant.transliteration, variant.stress_offset))

    return "<br>".join(hebrew_parts), "<br>".join(transliteration_parts)


def _root_link(root: str, url: str) -> str:
    return (
        f'<a href="{escape(url)}" target="_blank" rel="noopener noreferrer" '
        f'style="{ROOT_LINK}">{escape(root) or "link"}</a>'
    )


def _hebrew_tds(cells: List[Tuple[str, str]]) -> str:
    return "\n".join(f'      <td style="{HEBREW_FIRST_ROW}">{hebrew}</td>' for hebrew, _ in cells)


def _transliteration_tds(cells: List[Tuple[str, str]]) -> str:
    return "\n".join(f'      <td style="{TRANSLITERATION_ROW}">{latin}</td>' for _, latin in cells)


def noun_columns(result: NounResult) -> Tuple[Form, Form, Form, Form]:
    """(m_singular, f_singular, m_plural, f_plural) display cells for a noun.

    Masculine nouns fill the masculine columns; all others the feminine ones.
    """
    if result.gender == GENDER_MASCULINE:
        return result.singular, EMPTY_FORM, result.plural, EMPTY_FORM
    return EMPTY_FORM, result.singular, EMPTY_FORM, result.plural


def _four_form_rows(meaning: str, forms: Tuple[Form, ...], root: str, url: str, pattern: str) -> str:
    cells = [format_hebrew_cell(f) for f in forms]
    return f"""
    <tr>
      <td rowspan="2" style="{MEANING_CELL}">{escape(meaning)}</td>
{_hebrew_tds(cells)}
      <td style="{ROOT_CELL}">
        {_root_link(root, url)}
      </td>
    </tr>
    <tr>
{_transliteration_tds(cells)}
      <td style="{PATTERN_CELL}">{escape(pattern)}</td>
    </tr>
  """


def generate_noun_rows(result: NounResult) -> str:
    return _four_form_rows(result.meaning, noun_columns(result), result.root, result.url, result.pattern)


def generate_adjective_rows(result: AdjectiveResult) -> str:
    forms = (result.m_singular, result.f_singular, result.m_plural, result.f_plural)
    return _four_form_rows(result.meaning, forms, result.root, result.url, result.pattern)


def _binyan_and_root(result: VerbResult, rowspan: int) -> str:
    return f"""      <td rowspan="{rowspan}" style="{BINYAN_CELL}">{escape(result.binyan)}</td>
      <td rowspan="{rowspan}" style="{ROOT_CELL}">
        {_root_link(result.root, result.url)}
      </td>"""


def _simple_verb_rows(result: VerbResult, meaning: str, forms: Tuple[Form, ...]) -> str:
    cells = [format_hebrew_cell(f) for f in forms]
    return f"""
    <tr>
      <td rowspan="2" style="{MEANING_CELL}">{escape(meaning)}</td>
{_hebrew_tds(cells)}
{_binyan_and_root(result, 2)}
    </tr>
    <tr>
{_transliteration_tds(cells)}
    </tr>
  """


def generate_present_rows(result: VerbResult) -> str:
    forms = (result.infinitive, result.m_singular, result.f_singular, result.m_plural, result.f_plural)
    return _simple_verb_rows(result, result.meaning, forms)


def generate_imperative_rows(result: VerbResult) -> str:
    forms = (
        result.imperative_m_singular,
        result.imperative_f_singular,
        result.imperative_m_plural,
        result.imperative_f_plural,
    )
    return _simple_verb_rows(result, result.imperative_meaning or result.meaning, forms)


def _person_rows(cells: List[Tuple[str, str]], colspans: List[int]) -> Tuple[str, str]:
    """Two rows (Hebrew, transliteration) for one grammatical person."""
    def spanned(style: str, content: str, colspan: int) -> str:
        span = f' colspan="{colspan}"' if colspan > 1 else ""
        return f'      <td{span} style="{style}">{content}</td>'

    hebrew = "\n".join(spanned(HEBREW_FIRST_ROW, h, c) for (h, _), c in zip(cells, colspans))
    latin = "\n".join(spanned(TRANSLITERATION_ROW, t, c) for (_, t), c in zip(cells, colspans))
    return hebrew, latin


def _tense_rows(
    result: VerbResult,
    meaning: str,
    persons: List[Tuple[List[Form], List[int]]],
) -> str:
    """Six rows: three persons, each a Hebrew row and a transliteration row."""
    rows: List[str] = []
    for index, (forms, colspans) in enumerate(persons):
        hebrew, latin = _person_rows([format_hebrew_cell(f) for f in forms], colspans)
        person_cell = f'      <td rowspan="2" style="{PERSON_CELL}">{index + 1}</td>'
        if index == 0:
            rows.append(
                f"""    <tr>
      <td rowspan="6" style="{MEANING_CELL}">{escape(meaning)}</td>
{person_cell}
{hebrew}
{_binyan_and_root(result, 6)}
    </tr>"""
            )
        else:
            rows.append(f"    <tr>\n{person_cell}\n{hebrew}\n    </tr>")
        rows.append(f"    <tr>\n{latin}\n    </tr>")
    return "\n" + "\n".join(rows) + "\n  "


def generate_past_rows(result: VerbResult) -> str:
    persons = [
        ([result.past_1st_m_singular, result.past_1st_m_plural], [2, 2]),
        ([result.past_2nd_m_singular, result.past_2nd_f_singular, result.past_2nd_m_plural, result.past_2nd_f_plural], [1, 1, 1, 1]),
        ([result.past_3rd_m_singular, result.past_3rd_f_singular, result.past_3rd_m_plural], [1, 1, 2]),
    ]
    return _tense_rows(result, result.meaning, persons)


def generate_future_rows(result: VerbResult) -> str:
    persons = [
        ([result.future_1st_m_singular, result.future_1st_m_plural], [2, 2]),
        ([result.future_2nd_m_singular, result.future_2nd_f_singular, result.future_2nd_m_plural, result.future_2nd_f_plural], [1, 1, 1, 1]),
        ([result.future_3rd_m_singular, result.future_3rd_f_singular, result.future_3rd_m_plural, result.future_3rd_f_plural], [1, 1, 1, 1]),
    ]
    return _tense_rows(result, result.future_meaning or result.meaning, persons)


def generate_table_container(table_id: str, row_html: str, button_label: str = "Copy Table") -> str:
    return f"""
  <div class="table-container">
    <div class="copy-button-container">
      <button class="copy-button" onclick="copyTable('{table_id}', event)">{button_label}</button>
    </div>
    <table id="{table_id}">
      <tbody>
        {row_html}
      </tbody>
    </table>
  </div>"""


def _all_empty(result: VerbResult, prefix: str) -> bool:
    return all(form.is_empty() for name, form in result.forms() if name.startswith(prefix))


def generate_tables(result: PartOfSpeechRecord, base_id: Optional[int] = None) -> List[str]:
    """Table containers for a record.

    Verbs always get a present tense table; imperative, past and future
    tables are left out when the page had none of their forms.
    """
    base_id = base_id if base_id is not None else int(time.time() * 1000)
    tables: List[str] = []

    if isinstance(result, NounResult):
        tables.append(generate_table_container(f"table-{base_id}", generate_noun_rows(result)))
    elif isinstance(result, AdjectiveResult):
        tables.append(generate_table_container(f"table-{base_id}", generate_adjective_rows(result)))
    elif isinstance(result, VerbResult):
        tables.append(generate_table_container(
            f"table-{base_id}-present", generate_present_rows(result), "Copy Present Tense Table"))
        if not _all_empty(result, "imperative_"):
            tables.append(generate_table_container(
                f"table-{base_id}-imperative", generate_imperative_rows(result), "Copy Imperative Table"))
        if not _all_empty(result, "past_"):
            tables.append(generate_table_container(
                f"table-{base_id}-past", generate_past_rows(result), "Copy Past Tense Table"))
        if not _all_empty(result, "future_"):
            tables.append(generate_table_container(
                f"table-{base_id}-future", generate_future_rows(result), "Copy Future Tense Table"))
    return tables


_PAGE_START = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Pealim Data</title>
  <style>
    body {
      margin: 100px auto 0;
      max-width: 1200px;
      padding: 0 20px;
    }
    .table-container {
      margin-bottom: 40px;
    }
    .copy-button-container {
      display: flex;
      justify-content: center;
      margin-bottom: 16px;
    }
    .copy-button {
      padding: 12px 24px;
      font-size: 16px;
      font-weight: 500;
      color: white;
      background: #0066cc;
      border: none;
      border-radius: 8px;
      cursor: pointer;
      transition: background-color 0.2s;
      font-family: 'Helvetica Neue', Arial, sans-serif;
    }
    .copy-button:hover {
      background: #0052a3;
    }
    .copy-button:active {
      background: #003d7a;
    }
    table {
      border-collapse: collapse;
      width: 100%;
      font-family: 'Helvetica Neue', Arial, sans-serif;
    }
    td {
      border: 1px solid #d0d0d0;
      padding: 2px 8px;
    }
    @media (prefers-color-scheme: dark) {
      .copy-button {
        background: #4d9fff;
      }
      .copy-button:hover {
        background: #3385ff;
      }
      .copy-button:active {
        background: #1a6fff;
      }
    }
  </style>
</head>
<body>
"""

_PAGE_END = """
  <script>
    function copyTable(tableId, event) {
      const table = document.getElementById(tableId);
      if (!table) return;

      const range = document.createRange();
      range.selectNode(table);
      const selection = window.getSelection();
      selection.removeAllRanges();
      selection.addRange(range);

      try {
        document.execCommand('copy');
        selection.removeAllRanges();

        const button = event.target;
        const originalText = button.textContent;
        button.textContent = 'Copied!';
        button.style.background = '#28a745';
        setTimeout(() => {
          button.textContent = originalText;
          button.style.background = '';
        }, 1000);
      } catch (err) {
        console.error('Failed to copy:', err);
      }
    }
  </script>
</body>
</html>
"""


def generate_html(result: PartOfSpeechRecord, base_id: Optional[int] = None) -> str:
    """Render a complete standalone HTML page for a record."""
    return _PAGE_START + "\n".join(generate_tables(result, base_id)) + _PAGE_END
