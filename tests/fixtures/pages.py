"""
Trimmed-down Pealim pages for use in tests.

Only the markup the parser looks at is kept: the page header, the root and
meaning paragraphs and the conjugation table.
"""

# Spellings used on the pages, so tests can refer to them by name
MICHTAV = "מִכְתָּב"
MICHTAVIM = "מִכְתָּבִים"
PATUR = "פָּתוּר"
PATUR_PLAIN = "פתור"
PTURA = "פְּתוּרָה"
PTURIM = "פְּתוּרִים"
PTUROT = "פְּתוּרוֹת"
LICHTOV = "לִכְתֹּב"
KOTEV = "כּוֹתֵב"
KOTEVET = "כּוֹתֶבֶת"
KOTVIM = "כּוֹתְבִים"
KOTVOT = "כּוֹתְבוֹת"
KTOV = "כְּתֹב"
KTOV_FULL = "כְּתוֹב"
KATAVTI = "כָּתַבְתִּי"
KATAVTEM = "כְּתַבְתֶּם"
KATAVTEM_COLLOQUIAL = "כָּתַבְתֶּם"
KATAV = "כָּתַב"
TICHTOVNA = "תִּכְתֹּבְנָה"
YICHTEVU = "יִכְתְּבוּ"


def _form(form_id, menukad, transcription, meaning=""):
    meaning_div = f'<div class="meaning">{meaning}</div>' if meaning else ""
    return (
        f'<div id="{form_id}">'
        f'<div><span class="menukad">{menukad}</span></div>'
        f'<div class="transcription">{transcription}</div>'
        f"{meaning_div}"
        f"</div>"
    )


def _cell(form_id, menukad, transcription, extra="", colspan=1):
    span = f' colspan="{colspan}"' if colspan > 1 else ""
    return f'<td class="conj-td"{span}>{_form(form_id, menukad, transcription)}{extra}</td>'


NOUN_URL = "https://www.pealim.com/dict/1027-michtav/"

NOUN_PAGE = f"""<!DOCTYPE html>
<html><body>
<div class="container">
<h2 class="page-header">Inflection of {MICHTAV}</h2>
<p>Noun – miktav pattern, masculine</p>
<p>Root: כ - ת - ב</p>
<h3 class="page-header">Meaning</h3>
<div class="lead">letter, mail</div>
<table class="table conjugation-table">
<thead><tr><th></th><th>Singular</th><th>Plural</th></tr></thead>
<tbody>
<tr>
<th>Absolute state</th>
{_cell("s", MICHTAV, "micht<b>a</b>v")}
{_cell("p", MICHTAVIM, "michtav<b>i</b>m")}
</tr>
</tbody>
</table>
</div>
</body></html>
"""


ADJECTIVE_URL = "https://www.pealim.com/dict/1633-patur/"

ADJECTIVE_PAGE = f"""<!DOCTYPE html>
<html><body>
<h2 class="page-header">Inflection of {PATUR}</h2>
<p>Adjective – pa'ul pattern</p>
<p>Root: פ - ת - ר</p>
<h3 class="page-header">Meaning</h3>
<div class="lead">solved, resolved</div>
<table class="table conjugation-table">
<tr><th>Masculine singular</th><th>Feminine singular</th><th>Masculine plural</th><th>Feminine plural</th></tr>
<tr>
<td class="conj-td"><div id="ms-a"><div><span class="menukad">{PATUR}</span> ~ {PATUR_PLAIN}</div><div class="transcription">pat<b>u</b>r</div></div></td>
{_cell("fs-a", PTURA, "ptur<b>a</b>")}
{_cell("mp-a", PTURIM, "ptur<b>i</b>m")}
{_cell("fp-a", PTUROT, "ptur<b>o</b>t")}
</tr>
</table>
</body></html>
"""


VERB_URL = "https://www.pealim.com/dict/1-lichtov/"

_IMPERATIVE_AUX = (
    '<div class="aux-forms">'
    f'<div><span class="menukad">{KTOV}</span> <span class="transcription">kt<b>o</b>v</span></div>'
    "</div>"
)

_PAST_2MP_AUX = (
    '<div class="popover-host"><div class="aux-forms hidden">'
    "In colloquial speech the ending is often unstressed: "
    f'<div><span class="menukad">{KATAVTEM_COLLOQUIAL}</span> <span class="transcription">k<b>a</b>tavtem</span></div>'
    "</div></div>"
)

_FUTURE_3FP_AUX = (
    '<div class="popover-host"><div class="aux-forms hidden">'
    "In modern language, the masculine form is generally used: "
    f'<div><span class="menukad">{YICHTEVU}</span> <span class="transcription">yichtev<b>u</b></span></div>'
    "</div></div>"
)

VERB_PAGE = f"""<!DOCTYPE html>
<html><body>
<h2 class="page-header">Conjugation of {LICHTOV}</h2>
<p>Verb – PA'AL</p>
<p>Root: כ - ת - ב</p>
<h3 class="page-header">Meaning</h3>
<div class="lead">to write</div>
<table class="table conjugation-table">
<tr>
<th colspan="2"></th>
<th>Masculine singular</th><th>Feminine singular</th><th>Masculine plural</th><th>Feminine plural</th>
</tr>
<tr>
<th>Present tense</th>
{_cell("AP-ms", KOTEV, "kot<b>e</b>v")}
{_cell("AP-fs", KOTEVET, "kot<b>e</b>vet")}
{_cell("AP-mp", KOTVIM, "kotv<b>i</b>m")}
{_cell("AP-fp", KOTVOT, "kotv<b>o</b>t")}
</tr>
<tr>
<th rowspan="3">Past tense</th>
<th>1st</th>
{_cell("PERF-1s", KATAVTI, "kat<b>a</b>vti", colspan=2)}
{_cell("PERF-1p", "כָּתַבְנוּ", "kat<b>a</b>vnu", colspan=2)}
</tr>
<tr>
<th>2nd</th>
{_cell("PERF-2ms", "כָּתַבְתָּ", "kat<b>a</b>vta")}
{_cell("PERF-2fs", "כָּתַבְתְּ", "kat<b>a</b>vt")}
{_cell("PERF-2mp", KATAVTEM, "ktavt<b>e</b>m", extra=_PAST_2MP_AUX)}
{_cell("PERF-2fp", "כְּתַבְתֶּן", "ktavt<b>e</b>n")}
</tr>
<tr>
<th>3rd</th>
{_cell("PERF-3ms", KATAV, "kat<b>a</b>v")}
{_cell("PERF-3fs", "כָּתְבָה", "katv<b>a</b>")}
{_cell("PERF-3p", "כָּתְבוּ", "katv<b>u</b>", colspan=2)}
</tr>
<tr>
<th rowspan="3">Future tense</th>
<th>1st</th>
{_cell("IMPF-1s", "אֶכְתֹּב", "echt<b>o</b>v", colspan=2)}
{_cell("IMPF-1p", "נִכְתֹּב", "nicht<b>o</b>v", colspan=2)}
</tr>
<tr>
<th>2nd</th>
{_cell("IMPF-2ms", "תִּכְתֹּב", "ticht<b>o</b>v")}
{_cell("IMPF-2fs", "תִּכְתְּבִי", "tichtev<b>i</b>")}
{_cell("IMPF-2mp", "תִּכְתְּבוּ", "tichtev<b>u</b>")}
{_cell("IMPF-2fp", TICHTOVNA, "ticht<b>o</b>vna")}
</tr>
<tr>
<th>3rd</th>
{_cell("IMPF-3ms", "יִכְתֹּב", "yicht<b>o</b>v")}
{_cell("IMPF-3fs", "תִּכְתֹּב", "ticht<b>o</b>v")}
{_cell("IMPF-3mp", YICHTEVU, "yichtev<b>u</b>")}
{_cell("IMPF-3fp", TICHTOVNA, "ticht<b>o</b>vna", extra=_FUTURE_3FP_AUX)}
</tr>
<tr>
<th colspan="2">Imperative</th>
{_cell("IMP-2ms", KTOV_FULL + "!", "kt<b>o</b>v!", extra=_IMPERATIVE_AUX)}
{_cell("IMP-2fs", "כִּתְבִי!", "kitv<b>i</b>!")}
{_cell("IMP-2mp", "כִּתְבוּ!", "kitv<b>u</b>!")}
{_cell("IMP-2fp", "כְּתֹבְנָה!", "kt<b>o</b>vna!")}
</tr>
<tr>
<th colspan="2">Infinitive</th>
<td colspan="4" class="conj-td">{_form("INF-L", LICHTOV, "licht<b>o</b>v")}</td>
</tr>
</table>
</body></html>
"""


UNKNOWN_URL = "https://www.pealim.com/dict/9999-something/"

UNKNOWN_PAGE = """<!DOCTYPE html>
<html><body>
<h2 class="page-header">Something</h2>
<p>Preposition – with pronoun suffixes</p>
</body></html>
"""
