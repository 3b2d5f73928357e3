"""TEXTMORPH test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module/class/function.
- e2e/  : The `textmorph` CLI driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit and e2e are applied by directory (see conftest.py); property by hand.
"""
