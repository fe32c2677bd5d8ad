"""Inline CSS for the rendered tables.

Styles are inlined on each cell so a copied table keeps its look when pasted
into a spreadsheet or document.
"""

FF = "font-family: 'Helvetica Neue', Arial, sans-serif;"
VA = "vertical-align: middle;"
TAL = "text-align: left;"
TAC = "text-align: center;"
RTL = "direction: rtl;"

FS825 = "font-size: 8.25pt;"
FS9 = "font-size: 9pt;"
FS975 = "font-size: 9.75pt;"

P0 = "padding: 0px;"
P0_4 = "padding: 0px 4px;"
P2_0 = "padding: 2px 0px;"

FWB = "font-weight: bold;"

MEANING_CELL = f"{FF} {FS9} {VA} {TAL} {P0_4}"
PERSON_CELL = f"{FF} {FS9} {TAC} {VA}"
HEBREW_FIRST_ROW = f"{FF} {FS975} {RTL} {TAC} {VA} {P2_0}"
TRANSLITERATION_ROW = f"{FF} {FS825} {TAC} {VA}"
ROOT_CELL = f"{FF} {FS9} {FWB} {VA} {TAC} {P0}"
BINYAN_CELL = f"{FF} {FS9} {FWB} {VA} {TAC} {P0}"
PATTERN_CELL = f"{FF} {FS825} {TAC} {VA}"
ROOT_LINK = "color: inherit; text-decoration: none;"
