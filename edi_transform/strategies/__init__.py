"""
Strategies sub-package for edi-transform.

Contains the format-specific parsers and formatters that convert payloads
to and from the intermediate Document.

Design: Strategy Pattern
- base.py defines the BaseParser / BaseFormatter ABCs.
- delimited.py implements the segment/element delimited string format.
- json_codec.py wraps the ``json`` module.
- xml_codec.py wraps ``xml.etree.ElementTree``.

The resolver (registry.py) selects the strategy for a format tag at runtime.
"""
