import random
import uuid

from lineage_metagen.utils.ids import DELAY_IN_MINUTES, FIELD_TYPES, INT_MAX, IdGenerator


def test_names_use_kind_prefix_and_non_negative_id():
    ids = IdGenerator(seed=3)

    for prefix, factory in [
        ("namespace", ids.new_namespace_name),
        ("job", ids.new_job_name),
        ("dataset", ids.new_dataset_name),
        ("field", ids.new_field_name),
        ("description", ids.new_description),
    ]:
        name = factory()
        assert name.startswith(prefix)
        suffix = int(name[len(prefix):])
        assert 0 <= suffix < INT_MAX


def test_run_id_is_uuid4_and_reproducible_under_seed():
    first = IdGenerator(seed=11).new_run_id()
    second = IdGenerator(seed=11).new_run_id()

    assert isinstance(first, uuid.UUID)
    assert first.version == 4
    assert first == second


def test_draws_come_from_injected_random_source():
    rng = random.Random(5)
    ids = IdGenerator(rng=rng)

    assert ids.rng is rng
    assert ids.new_field_type() in FIELD_TYPES
    assert 0 <= ids.new_delay_in_minutes() < DELAY_IN_MINUTES
    assert isinstance(ids.has_parent_run(), bool)


def test_coin_flip_produces_both_outcomes():
    ids = IdGenerator(seed=0)
    flips = {ids.has_parent_run() for _ in range(200)}
    assert flips == {True, False}
