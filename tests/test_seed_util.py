from world.seed_util import make_rng


def test_fixed_seed_is_reused():
    rng, seed_used = make_rng(42)
    assert seed_used == 42
    other, _ = make_rng(42)
    assert [rng.random() for _ in range(3)] == [other.random() for _ in range(3)]


def test_random_seed_replays():
    rng, seed_used = make_rng(-1)
    assert 0 <= seed_used < 2**31
    replay, _ = make_rng(seed_used)
    assert rng.random() == replay.random()
