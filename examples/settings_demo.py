"""Settings and data persistence demo.

Run twice: the first run creates default files, the second loads them.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import ClassVar, Dict

from appstate import AppStateError, Data, Settings, configure_logging


@dataclass
class MyConfiguration(Settings):
    ORGANIZATION: ClassVar[str] = "museun"
    APPLICATION: ClassVar[str] = "foobar"
    NAME: ClassVar[str] = "config.yaml"

    name: str = "Foobar"
    attempts: int = 3
    force: bool = False


@dataclass
class MyData(Data):
    ORGANIZATION: ClassVar[str] = "museun"
    APPLICATION: ClassVar[str] = "foobar"
    NAME: ClassVar[str] = "data.json"

    data: Dict[str, str] = field(default_factory=dict)


def main() -> int:
    configure_logging("INFO")

    try:
        config = MyConfiguration.load_or_default()
        data = MyData.load_or_default()
    except AppStateError as e:
        print(f"cannot load configuration: {e}", file=sys.stderr)
        return 1

    if config.is_default:
        print(f"a default configuration was created at: {config.path}")
        print("edit it and run again")
        return 1

    print(f"{config.value.name}: {config.value.attempts} attempt(s), force={config.value.force}")

    data.value.data[str(len(data.value.data))] = config.value.name
    written = data.value.save()
    print(f"{len(data.value.data)} entr(ies) stored in {written}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
