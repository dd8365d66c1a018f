"""Core logic for generating paired lineage events."""

from __future__ import annotations

import datetime as dt
import logging
import random
from typing import Callable, List, Optional

from .config import MetadataConfig
from .errors import GenerationCancelled
from .graph import new_inputs, new_job, new_outputs, new_run
from .models import EventType, RunEvent, RunEvents
from .sizing import estimate_event_bytes, resolve_size_budget, validate_size_request
from .utils.ids import IdGenerator

logger = logging.getLogger(__name__)

Clock = Callable[[dt.tzinfo], dt.datetime]

# Keeps COMPLETE strictly after START when the random delay is zero minutes.
MIN_COMPLETE_OFFSET = dt.timedelta(seconds=1)


def _wall_clock(tz: dt.tzinfo) -> dt.datetime:
    return dt.datetime.now(tz)


class MetadataGenerator:
    """Generate batches of OpenLineage ``START``/``COMPLETE`` event pairs.

    The random source, namespace, reference time zone and clock all belong to
    the generator instance, so two generators never share state. Passing the
    same ``config.seed`` and a fixed ``clock`` reproduces a batch exactly.
    """

    def __init__(
        self,
        config: MetadataConfig | None = None,
        rng: random.Random | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config or MetadataConfig()
        self.ids = IdGenerator(rng=rng, seed=self.config.seed)
        self.clock = clock or _wall_clock
        self.tz = self.config.tzinfo()
        self.namespace = self.config.namespace or self.ids.new_namespace_name()

    @property
    def rng(self) -> random.Random:
        return self.ids.rng

    def now(self) -> dt.datetime:
        return self.clock(self.tz)

    def generate(
        self,
        runs: int | None = None,
        bytes_per_event: int | None = None,
        inputs_per_event: int | None = None,
        bytes_per_input: int | None = None,
        outputs_per_event: int | None = None,
        bytes_per_output: int | None = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> List[RunEvent]:
        """Return ``2 * runs`` events ordered ``[start1, complete1, start2, ...]``.

        Arguments left as ``None`` fall back to the generator config. The whole
        request is validated before the first run is built; if ``should_stop``
        returns true between runs, :class:`GenerationCancelled` is raised and
        nothing is returned.
        """

        cfg = self.config
        runs = cfg.runs if runs is None else runs
        bytes_per_event = cfg.bytes_per_event if bytes_per_event is None else bytes_per_event
        inputs_per_event = cfg.inputs_per_event if inputs_per_event is None else inputs_per_event
        bytes_per_input = cfg.bytes_per_input if bytes_per_input is None else bytes_per_input
        outputs_per_event = cfg.outputs_per_event if outputs_per_event is None else outputs_per_event
        bytes_per_output = cfg.bytes_per_output if bytes_per_output is None else bytes_per_output

        validate_size_request(
            runs, bytes_per_event, inputs_per_event, bytes_per_input, outputs_per_event, bytes_per_output
        )

        logger.info(
            "Generating %d runs in namespace %s, each START event will have %d inputs, "
            "%d outputs, and a total size of ~%d bytes",
            runs,
            self.namespace,
            inputs_per_event,
            outputs_per_event,
            bytes_per_event,
        )

        events: List[RunEvent] = []
        for completed in range(runs):
            if should_stop is not None and should_stop():
                raise GenerationCancelled(completed, runs)
            run_events = self.new_run_events(
                bytes_per_event,
                inputs_per_event,
                bytes_per_input,
                outputs_per_event,
                bytes_per_output,
            )
            events.extend(run_events)
        return events

    def new_run_events(
        self,
        bytes_per_event: int,
        inputs_per_event: int,
        bytes_per_input: int,
        outputs_per_event: int,
        bytes_per_output: int,
    ) -> RunEvents:
        """Build the ``START`` and ``COMPLETE`` event for one new run."""

        ids = self.ids
        run = new_run(ids, self.namespace, self.now(), ids.has_parent_run())
        job = new_job(ids, self.namespace)

        budget = resolve_size_budget(ids.rng, bytes_per_event, inputs_per_event, outputs_per_event)
        logger.debug(
            "Run %s: %d inputs, %d outputs, ~%d bytes",
            run.run_id,
            budget.num_inputs,
            budget.num_outputs,
            estimate_event_bytes(budget),
        )

        inputs = new_inputs(
            ids, self.namespace, budget.num_inputs, budget.num_fields_for_inputs, bytes_per_input
        )
        outputs = new_outputs(
            ids, self.namespace, budget.num_outputs, budget.num_fields_for_outputs, bytes_per_output
        )

        start_time = self.now()
        start = RunEvent(
            event_type=EventType.START,
            event_time=start_time,
            run=run,
            job=job,
            inputs=inputs,
            outputs=outputs,
            producer=self.config.producer,
        )
        complete = RunEvent(
            event_type=EventType.COMPLETE,
            event_time=start_time + self._new_completion_delay(),
            run=run,
            job=job,
            producer=self.config.producer,
        )
        return RunEvents(start=start, complete=complete)

    def _new_completion_delay(self) -> dt.timedelta:
        delay = dt.timedelta(minutes=self.ids.new_delay_in_minutes())
        return delay or MIN_COMPLETE_OFFSET


def generate(
    runs: int,
    bytes_per_event: int,
    inputs_per_event: int,
    bytes_per_input: int,
    outputs_per_event: int,
    bytes_per_output: int,
    config: MetadataConfig | None = None,
) -> List[RunEvent]:
    """Generate one batch with a fresh :class:`MetadataGenerator`."""

    generator = MetadataGenerator(config=config)
    return generator.generate(
        runs=runs,
        bytes_per_event=bytes_per_event,
        inputs_per_event=inputs_per_event,
        bytes_per_input=bytes_per_input,
        outputs_per_event=outputs_per_event,
        bytes_per_output=bytes_per_output,
    )
