"""Fake GitHub Actions output publishing for testing."""

from claude_prep.gateway.gha_output.abc import GhaOutput


class FakeGhaOutput(GhaOutput):
    """Collects outputs and exported variables in memory."""

    def __init__(self) -> None:
        self._outputs: dict[str, str] = {}
        self._variables: dict[str, str] = {}

    def set_output(self, key: str, value: str) -> None:
        self._outputs[key] = value

    def export_variable(self, key: str, value: str) -> None:
        self._variables[key] = value

    @property
    def outputs(self) -> dict[str, str]:
        return dict(self._outputs)

    @property
    def variables(self) -> dict[str, str]:
        return dict(self._variables)
