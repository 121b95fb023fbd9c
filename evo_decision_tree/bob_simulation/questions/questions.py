from importlib import import_module
from pathlib import Path

from .ResponsibleQuestion import QuestionKind, ResponsibleQuestion

question_kinds: list[QuestionKind] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    module = import_module(f".{file.stem}", package="evo_decision_tree.bob_simulation.questions.impl")
    question_kinds.append(module.kind)


def question_palette() -> list[ResponsibleQuestion]:
    return [question for kind in question_kinds for question in kind.palette()]
