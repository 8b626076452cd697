"""Hierarchical scopes packed into a single 128-bit integer.

A scope such as ``source.rust.meta.function`` is split into atoms on dots.
Each atom is interned in a repository and stored as a 16-bit number
(repository index + 1, so that 0 marks an unused slot). Up to eight atoms
are packed most-significant first, which makes integer ordering match the
lexicographic ordering of the atom sequences. Atoms past the eighth are
dropped.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

MAX_ATOMS_IN_SCOPE = 8
_U16_MAX = 0xFFFF
# Leaving room for 0 and the maximum value
MAX_ATOMS_IN_REPOSITORY = _U16_MAX - 2
# Repository index used for empty atoms
EMPTY_ATOM_INDEX = _U16_MAX - 1
# Stored atom number for empty atoms
EMPTY_ATOM_NUMBER = _U16_MAX

_ATOM_BITS = 16
_ATOM_MASK = 0xFFFF
_U128_MAX = (1 << 128) - 1


def _shift_for(index: int) -> int:
    return (MAX_ATOMS_IN_SCOPE - 1 - index) * _ATOM_BITS


@dataclass(frozen=True, order=True, repr=False)
class Scope:
    """A packed scope of at most eight atoms."""

    atoms: int = 0

    def atom_at(self, index: int) -> int:
        """Return the stored atom number at ``index``.

        0 means an unused slot, ``EMPTY_ATOM_NUMBER`` an empty atom, and any
        other value is the repository index plus one.
        """
        if not 0 <= index < MAX_ATOMS_IN_SCOPE:
            raise IndexError(f"atom index {index} out of range")
        return (self.atoms >> _shift_for(index)) & _ATOM_MASK

    def _missing_atoms(self) -> int:
        if self.atoms == 0:
            return MAX_ATOMS_IN_SCOPE
        trailing_zeros = (self.atoms & -self.atoms).bit_length() - 1
        return trailing_zeros // _ATOM_BITS

    def __len__(self) -> int:
        return MAX_ATOMS_IN_SCOPE - self._missing_atoms()

    def is_empty(self) -> bool:
        return self.atoms == 0

    def is_prefix_of(self, other: Scope) -> bool:
        """Whether every atom of this scope starts ``other``."""
        missing = self._missing_atoms()
        if missing == MAX_ATOMS_IN_SCOPE:
            return True
        mask = (_U128_MAX << (missing * _ATOM_BITS)) & _U128_MAX
        return (self.atoms ^ other.atoms) & mask == 0

    def build_string(self) -> str:
        """Rebuild the dotted string form using the global repository."""
        with global_scope_repo() as repo:
            return repo.to_string(self)

    def __str__(self) -> str:
        return self.build_string()

    def __repr__(self) -> str:
        return f'Scope("{self.build_string()}")'


@dataclass
class ScopeRepository:
    """Interns atom strings so scopes can store them as small numbers."""

    atoms: list[str] = field(default_factory=list)
    atom_index_map: dict[str, int] = field(default_factory=dict)

    def _atom_to_index(self, atom: str) -> int:
        if not atom:
            return EMPTY_ATOM_INDEX
        index = self.atom_index_map.get(atom)
        if index is not None:
            return index
        if len(self.atoms) >= MAX_ATOMS_IN_REPOSITORY:
            raise OverflowError(
                "Too many atoms in repository: exceeded "
                f"MAX_ATOMS_IN_REPOSITORY of {MAX_ATOMS_IN_REPOSITORY}"
            )
        index = len(self.atoms)
        self.atoms.append(atom)
        self.atom_index_map[atom] = index
        return index

    def atom_number_to_str(self, atom_number: int) -> str:
        """Return the atom string for a stored (1-based) atom number."""
        if atom_number <= 0:
            raise ValueError("atom number must be positive")
        return self.atoms[atom_number - 1]

    def parse(self, scope_str: str) -> Scope:
        """Pack a dotted scope string, keeping at most eight atoms."""
        if not scope_str:
            return Scope()
        packed = 0
        for i, part in enumerate(scope_str.split(".")[:MAX_ATOMS_IN_SCOPE]):
            atom_number = self._atom_to_index(part) + 1
            packed |= atom_number << _shift_for(i)
        return Scope(packed)

    def to_string(self, scope: Scope) -> str:
        """Rebuild the dotted string for ``scope``."""
        parts: list[str] = []
        for i in range(MAX_ATOMS_IN_SCOPE):
            atom = scope.atom_at(i)
            if atom == 0:
                break
            if atom == EMPTY_ATOM_NUMBER:
                parts.append("")
            else:
                parts.append(self.atom_number_to_str(atom))
        return ".".join(parts)


_lock = threading.RLock()
_repo = ScopeRepository()


@contextmanager
def global_scope_repo() -> Iterator[ScopeRepository]:
    """Hold the global repository lock and yield the repository."""
    with _lock:
        yield _repo


def replace_global_scope_repo(repo: ScopeRepository) -> None:
    """Swap in a new global repository, e.g. after loading saved state."""
    global _repo
    with _lock:
        _repo = repo


def parse_scopes(scope_str: str) -> list[Scope]:
    """Parse a whitespace-separated list of dotted scopes."""
    with global_scope_repo() as repo:
        return [repo.parse(part.strip()) for part in scope_str.split()]