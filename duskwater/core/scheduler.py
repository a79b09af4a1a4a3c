# duskwater/core/scheduler.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING, Callable, Dict, List, NewType, Union

if TYPE_CHECKING:
    from duskwater.core.context import SceneContext

SystemId = NewType("SystemId", str)


class Stage(Enum):
    TIME = auto()  # Advance simulated clocks
    MOVEMENT = auto()  # Free-fly camera integration
    POST_MOVEMENT = auto()  # Orbit target reconcile, pointer rotation


SystemFn = Callable[["SceneContext"], None]


@dataclass(slots=True)
class _Registration:
    stage: Stage
    func: SystemFn
    name: SystemId
    before: List[SystemId] = field(default_factory=list)
    after: List[SystemId] = field(default_factory=list)


def _as_list(
    deps: Union[SystemId, List[SystemId], None],
) -> List[SystemId]:
    if deps is None:
        return []
    if isinstance(deps, str):
        return [deps]
    return list(deps)


class Scheduler:
    """
    Runs per-tick systems grouped by stage.
    Inside a stage, order follows the declared before/after edges.
    """

    def __init__(self) -> None:
        self._registered: List[_Registration] = []
        self._execution_order: Dict[Stage, List[SystemFn]] = {
            s: [] for s in Stage
        }
        self._is_compiled = False

    def add_system(
        self,
        stage: Stage,
        system: SystemFn,
        name: Union[SystemId, None] = None,
        before: Union[SystemId, List[SystemId], None] = None,
        after: Union[SystemId, List[SystemId], None] = None,
    ) -> None:
        """Register a plain function as a system."""
        if self._is_compiled:
            raise RuntimeError(
                "Cannot add systems after scheduler is compiled."
            )

        sys_name = name or SystemId(getattr(system, "__name__"))
        if any(r.name == sys_name for r in self._registered):
            raise ValueError(f"System {sys_name!r} is already registered.")

        self._registered.append(
            _Registration(
                stage=stage,
                func=system,
                name=sys_name,
                before=_as_list(before),
                after=_as_list(after),
            )
        )

    def compile(self) -> None:
        by_stage: Dict[Stage, List[_Registration]] = {s: [] for s in Stage}
        for entry in self._registered:
            by_stage[entry.stage].append(entry)

        for stage, entries in by_stage.items():
            sorter: TopologicalSorter[SystemId] = TopologicalSorter()
            name_map = {entry.name: entry.func for entry in entries}

            for entry in entries:
                sorter.add(entry.name, *entry.after)
                for successor in entry.before:
                    sorter.add(successor, entry.name)

            try:
                sorted_names = list(sorter.static_order())
            except CycleError as e:
                raise RuntimeError(
                    f"Cycle detected in stage {stage.name}: {e.args[1]}"
                ) from e

            # Dependencies on systems from other stages are ordering hints only
            self._execution_order[stage] = [
                name_map[n] for n in sorted_names if n in name_map
            ]

        self._is_compiled = True

    def run_stage(self, stage: Stage, ctx: SceneContext) -> None:
        if not self._is_compiled:
            self.compile()

        for system in self._execution_order[stage]:
            system(ctx)

    def run_all(self, ctx: SceneContext) -> None:
        for stage in Stage:
            self.run_stage(stage, ctx)
