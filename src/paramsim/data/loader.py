"""Load parameter definitions from files and command-line strings."""

import csv
import json
from pathlib import Path
from typing import Any

from paramsim.exceptions import ConfigurationError
from paramsim.models import Parameter


def parse_parameter_spec(spec: str) -> Parameter:
    """Parse a ``name:min:max[:weight]`` string.

    Empty fields fall back to the form defaults, e.g. ``"speed::50"`` spans
    0..50 with weight 5.

    Raises:
        ConfigurationError: If the string has the wrong number of fields
            or a field is not a number
    """
    fields = spec.split(":")
    if len(fields) not in (3, 4):
        raise ConfigurationError(
            f"Expected name:min:max[:weight], got {spec!r}"
        )

    record = dict(zip(("name", "min", "max", "weight"), fields))
    return Parameter.from_user_input(record)


class ParameterLoader:
    """Reads parameter definitions from JSON or CSV files."""

    def __init__(self, base_dir: str | Path = "."):
        """Initialize loader.

        Args:
            base_dir: Directory that relative paths are resolved against
        """
        self.base_dir = Path(base_dir)

    def load(self, path: str | Path) -> list[Parameter]:
        """Load parameters from a ``.json`` or ``.csv`` file.

        JSON files hold a list of objects with ``name``, ``min``, ``max`` and
        optional ``weight`` keys (or an object with such a list under
        ``"parameters"``). CSV files have the same columns with a header row.

        Raises:
            ConfigurationError: On an unsupported format or invalid records
        """
        filepath = self.base_dir / path
        suffix = filepath.suffix.lower()

        if suffix == ".json":
            records = self._read_json(filepath)
        elif suffix == ".csv":
            records = self._read_csv(filepath)
        else:
            raise ConfigurationError(f"Unsupported parameter file format: {filepath.name}")

        return [Parameter.from_user_input(record) for record in records]

    def _read_json(self, filepath: Path) -> list[dict[str, Any]]:
        with open(filepath) as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get("parameters", [])
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise ConfigurationError(f"{filepath.name} must contain a list of parameter objects")
        return data

    def _read_csv(self, filepath: Path) -> list[dict[str, Any]]:
        with open(filepath, newline="") as f:
            return list(csv.DictReader(f))
