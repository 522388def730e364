"""GitHub Actions step outputs and exported environment variables.

Import from submodules:
- abc: GhaOutput
- real: RealGhaOutput
- fake: FakeGhaOutput
"""
