"""Domain layer for TEXTMORPH.

Contains the casing rules: the tokenizer, the case transform engine, the
explanation generator and the value objects they exchange. Everything here is
pure and synchronous; no I/O and no state survives a call.

Dependency rule: do not import from `textmorph.entrypoints`.
"""
