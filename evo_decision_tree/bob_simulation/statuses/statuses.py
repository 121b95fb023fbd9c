from importlib import import_module
from pathlib import Path

from .ResponsibleStatus import ResponsibleStatus, StatusKind

status_kinds: list[StatusKind] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    module = import_module(f".{file.stem}", package="evo_decision_tree.bob_simulation.statuses.impl")
    status_kinds.append(module.kind)


def status_palette() -> list[ResponsibleStatus]:
    return [status for kind in status_kinds for status in kind.palette()]
