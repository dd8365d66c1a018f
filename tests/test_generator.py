import datetime as dt
import random

import pytest

from lineage_metagen import generate
from lineage_metagen.config import MetadataConfig
from lineage_metagen.errors import GenerationCancelled, MetadataConfigError
from lineage_metagen.generator import MIN_COMPLETE_OFFSET, MetadataGenerator
from lineage_metagen.models import EventType
from lineage_metagen.sizing import DEFAULT_BYTES_PER_EVENT, total_io_for
from lineage_metagen.utils.ids import DELAY_IN_MINUTES


def test_batch_alternates_start_and_complete(make_generator):
    events = make_generator().generate(runs=5, bytes_per_event=736)

    assert len(events) == 10
    assert [e.event_type for e in events] == [EventType.START, EventType.COMPLETE] * 5


def test_pairs_share_identity_and_complete_has_no_io(make_generator):
    events = make_generator().generate(runs=20)

    for start, complete in zip(events[::2], events[1::2]):
        assert start.run.run_id == complete.run.run_id
        assert start.job == complete.job
        assert complete.event_time > start.event_time
        assert complete.event_time - start.event_time < dt.timedelta(minutes=DELAY_IN_MINUTES)
        assert complete.inputs == ()
        assert complete.outputs == ()


def test_zero_delay_still_advances_complete(make_generator, monkeypatch):
    generator = make_generator()
    monkeypatch.setattr(generator.ids, "new_delay_in_minutes", lambda: 0)

    start, complete = generator.new_run_events(736, 4, 0, 2, 0)

    assert complete.event_time - start.event_time == MIN_COMPLETE_OFFSET


def test_single_run_default_scenario(make_generator):
    events = make_generator().generate(
        runs=1,
        bytes_per_event=736,
        inputs_per_event=4,
        bytes_per_input=4096,
        outputs_per_event=2,
        bytes_per_output=4096,
    )

    start, complete = events
    assert start.event_type is EventType.START
    assert complete.event_type is EventType.COMPLETE
    assert (len(start.inputs), len(start.outputs)) == (4, 2)
    input_fields = {len(d.fields) for d in start.inputs}
    output_fields = {len(d.fields) for d in start.outputs}
    assert len(input_fields) == 1 and len(output_fields) == 1
    assert input_fields.pop() + output_fields.pop() == 16


def test_large_budget_scales_dataset_count(make_generator):
    bytes_per_event = DEFAULT_BYTES_PER_EVENT * 10
    events = make_generator().generate(runs=10, bytes_per_event=bytes_per_event)

    for start in events[::2]:
        assert len(start.inputs) + len(start.outputs) == total_io_for(bytes_per_event)
        assert len(start.inputs) + len(start.outputs) > 6


def test_all_entities_share_generator_namespace(make_generator):
    generator = make_generator(namespace="load-test")
    events = generator.generate(runs=10)

    for event in events:
        assert event.job.namespace == "load-test"
        if event.run.parent is not None:
            assert event.run.parent.job_namespace == "load-test"
        for dataset in event.inputs + event.outputs:
            assert dataset.namespace == "load-test"


def test_same_seed_reproduces_batch(make_generator):
    first = make_generator(seed=99).generate(runs=4)
    second = make_generator(seed=99).generate(runs=4)

    assert [e.to_dict() for e in first] == [e.to_dict() for e in second]


def test_different_seeds_diverge(make_generator):
    first = make_generator(seed=1).generate(runs=2)
    second = make_generator(seed=2).generate(runs=2)

    assert first[0].run.run_id != second[0].run.run_id


def test_zero_runs_returns_empty_batch(make_generator):
    assert make_generator().generate(runs=0) == []


def test_invalid_budget_aborts_before_any_run(make_generator):
    generator = make_generator()
    state = generator.rng.getstate()

    with pytest.raises(MetadataConfigError):
        generator.generate(runs=3, bytes_per_event=100)

    assert generator.rng.getstate() == state


def test_negative_runs_rejected(make_generator):
    with pytest.raises(MetadataConfigError):
        make_generator().generate(runs=-1)


def test_should_stop_cancels_between_runs(make_generator):
    calls = []

    def should_stop():
        calls.append(1)
        return len(calls) > 2

    with pytest.raises(GenerationCancelled) as excinfo:
        make_generator().generate(runs=5, should_stop=should_stop)

    assert excinfo.value.completed_runs == 2
    assert excinfo.value.requested_runs == 5


def test_events_use_configured_time_zone(make_generator):
    events = make_generator(time_zone="UTC").generate(runs=1)
    assert events[0].event_time.utcoffset() == dt.timedelta(0)


def test_injected_rng_is_used():
    rng = random.Random(42)
    generator = MetadataGenerator(MetadataConfig(namespace="ns"), rng=rng)
    assert generator.rng is rng


def test_module_level_generate():
    events = generate(2, 736, 4, 4096, 2, 4096, config=MetadataConfig(seed=5))
    assert len(events) == 4
