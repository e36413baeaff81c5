"""Service layer — operations returning ServiceResult.

Services sit between the CLI and the domain rules. They never print;
formatting is left to :mod:`resname.output`.
"""
