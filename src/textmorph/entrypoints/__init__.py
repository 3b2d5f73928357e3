"""Entrypoints (inbound adapters) for TEXTMORPH.

Expose the engine to the outside world. Parse and validate inputs (including
turning external mode identifiers into `CasingMode` values), call the domain
functions, and present results.

Dependency rule: may import `textmorph.domain`; the domain never imports from
here.
"""
