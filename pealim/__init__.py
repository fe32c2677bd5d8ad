"""Pealim conjugation table scraper.

Subpackages:
- pealim.common: Shared utilities (utils, logging, config, errors)
- pealim.schema: Form/Variant value types and per part-of-speech records
- pealim.input: Page fetching and parsing (HTML -> records)
- pealim.output: Table rendering and file output (records -> HTML)
"""

__version__ = "1.0.0"
