"""Built-in run configurations for the two historical fixture sets."""

from pathlib import Path

from .schema import RunConfiguration

PRESETS: dict[str, dict] = {
    "handson2_p1": {
        "executable": "./target/debug/handson2",
        "fixture_dir": "Testset_handson2_p1",
        "count": 11,
    },
    "handson2_p2": {
        "executable": "./target/debug/handson2_2",
        "fixture_dir": "Testset_handson2_p2",
        "count": 8,
    },
}

DEFAULT_PRESET = "handson2_p1"


def get_preset(name: str, work_dir: Path = Path(".")) -> RunConfiguration:
    """Build the RunConfiguration for a named preset.

    Raises:
        ValueError: If no preset has that name.
    """
    if name not in PRESETS:
        raise ValueError(
            f"Unknown preset '{name}'. Must be one of: {', '.join(sorted(PRESETS))}"
        )
    return RunConfiguration(name=name, work_dir=work_dir, **PRESETS[name])
