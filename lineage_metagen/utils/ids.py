"""Random identifier helpers for generated lineage entities."""

from __future__ import annotations

import random
import uuid
from typing import Sequence

INT_MAX = 2**31 - 1
FIELD_TYPES: Sequence[str] = ("VARCHAR", "TEXT", "INTEGER")
DELAY_IN_MINUTES = 10


class IdGenerator:
    """Produce names and ids from a single, explicit random source.

    Every draw the generator makes goes through ``self.rng`` so seeding one
    ``IdGenerator`` makes a whole batch reproducible.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def new_id(self) -> int:
        return self.rng.randrange(INT_MAX - 1)

    def new_namespace_name(self) -> str:
        return f"namespace{self.new_id()}"

    def new_job_name(self) -> str:
        return f"job{self.new_id()}"

    def new_dataset_name(self) -> str:
        return f"dataset{self.new_id()}"

    def new_field_name(self) -> str:
        return f"field{self.new_id()}"

    def new_description(self) -> str:
        return f"description{self.new_id()}"

    def new_field_type(self) -> str:
        return self.rng.choice(FIELD_TYPES)

    def new_run_id(self) -> uuid.UUID:
        """Return a version-4 UUID drawn from the generator's random source."""

        return uuid.UUID(int=self.rng.getrandbits(128), version=4)

    def new_delay_in_minutes(self) -> int:
        return self.rng.randrange(DELAY_IN_MINUTES)

    def has_parent_run(self) -> bool:
        return self.rng.random() < 0.5
