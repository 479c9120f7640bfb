from satfront.cnf.literals import decode_literal, encode_literal, check_literal_range
from satfront.cnf.clauses import parse_clause, parse_xor_clause, parse_assumptions
from satfront.cnf.buffers import (
    FLAT_TYPECODES, buffer_format, check_buffer_format, buffer_values, iter_flat_clauses
)

__all__ = [
    "decode_literal", "encode_literal", "check_literal_range",
    "parse_clause", "parse_xor_clause", "parse_assumptions",
    "FLAT_TYPECODES", "buffer_format", "check_buffer_format", "buffer_values", "iter_flat_clauses"
]
