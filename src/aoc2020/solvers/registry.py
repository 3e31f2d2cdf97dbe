"""Solver registry for aoc2020.

Maps solver names (``"day01"`` … ``"day05"`` for the built-in days) to
``Solver`` subclasses.  Solvers for further days can live in other
distributions and register through the "aoc2020.solvers" entry-point
group.

Example
-------
Register a solver with the decorator::

    from aoc2020.solvers.base import Solver
    from aoc2020.solvers.registry import solver_registry

    @solver_registry.register("day06")
    class CustomsSolver(Solver):
        day = 6
        title = "Custom Customs"
        ...

Load solvers from installed packages::

    solver_registry.load_entrypoints()

Retrieve one::

    solver = solver_registry.get("day06")()
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from typing import Final

from aoc2020.solvers.base import Solver

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP: Final[str] = "aoc2020.solvers"


def solver_name(day: int) -> str:
    """Return the registry key for ``day``, e.g. ``"day03"``."""
    return f"day{day:02d}"


class SolverNotFoundError(KeyError):
    """Raised when a requested solver name is not in the registry."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.solver_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Solver {name!r} is not registered in the {registry_name!r} registry. "
            "Check that the package providing it is installed and its "
            "entry-points are declared."
        )


class SolverAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.solver_name = name
        self.registry_name = registry_name
        super().__init__(
            f"Solver {name!r} is already registered in the {registry_name!r} registry. "
            "Use a unique name or deregister the existing entry first."
        )


class SolverRegistry:
    """Registry of ``Solver`` subclasses keyed by name.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._solvers: dict[str, type[Solver]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[Solver]], type[Solver]]:
        """Return a class decorator that registers the decorated solver.

        Raises
        ------
        SolverAlreadyRegisteredError
            If ``name`` is already in use in this registry.
        TypeError
            If the decorated class does not subclass ``Solver``.
        """

        def decorator(cls: type[Solver]) -> type[Solver]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[Solver]) -> None:
        """Register ``cls`` under ``name`` without decorator syntax.

        Raises
        ------
        SolverAlreadyRegisteredError
            If ``name`` is already registered.
        TypeError
            If ``cls`` is not a subclass of ``Solver``.
        """
        if name in self._solvers:
            raise SolverAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, Solver)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                f"it must be a subclass of {Solver.__name__}."
            )
        self._solvers[name] = cls
        logger.debug(
            "Registered solver %r -> %s in registry %r",
            name,
            cls.__qualname__,
            self._name,
        )

    def deregister(self, name: str) -> None:
        """Remove a solver from the registry.

        Raises
        ------
        SolverNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._solvers:
            raise SolverNotFoundError(name, self._name)
        del self._solvers[name]
        logger.debug("Deregistered solver %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[Solver]:
        """Return the class registered under ``name``.

        Raises
        ------
        SolverNotFoundError
            If no solver is registered under ``name``.
        """
        try:
            return self._solvers[name]
        except KeyError:
            raise SolverNotFoundError(name, self._name) from None

    def for_day(self, day: int) -> Solver:
        """Return a fresh solver instance for ``day``."""
        return self.get(solver_name(day))()

    def list_solvers(self) -> list[str]:
        """Return all registered solver names in alphabetical order."""
        return sorted(self._solvers)

    def __contains__(self, name: object) -> bool:
        return name in self._solvers

    def __len__(self) -> int:
        return len(self._solvers)

    def __repr__(self) -> str:
        return f"SolverRegistry(name={self._name!r}, solvers={self.list_solvers()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register solvers declared as package entry-points.

        Names that are already registered are skipped, so repeated calls
        are idempotent.  Entry-points that fail to import or register are
        logged and skipped.

        Parameters
        ----------
        group:
            The entry-point group name, "aoc2020.solvers" by default.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."aoc2020.solvers"]
            day06 = "my_package.day06:CustomsSolver"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._solvers:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (SolverAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )


solver_registry: Final[SolverRegistry] = SolverRegistry("solvers")
