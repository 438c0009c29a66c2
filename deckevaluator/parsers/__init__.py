from deckevaluator.parsers.decklist import parse_decklist
from deckevaluator.parsers.faces import front_face, front_face_record
from deckevaluator.parsers.mana import TypeLineParts, parse_mana_pips, parse_type_line
from deckevaluator.parsers.oracle import OracleToken, parse_oracle_text

__all__ = [
    "OracleToken",
    "TypeLineParts",
    "front_face",
    "front_face_record",
    "parse_decklist",
    "parse_mana_pips",
    "parse_oracle_text",
    "parse_type_line",
]
