from weightedrandom.util.rng import Rng


def test_same_seed_same_sequence():
    first = Rng(11)
    second = Rng(11)
    assert [first.randint(0, 100) for _ in range(20)] == [second.randint(0, 100) for _ in range(20)]


def test_fork_is_deterministic_and_independent():
    parent = Rng(5)
    assert parent.fork("draws").seed == Rng(5).fork("draws").seed
    assert parent.fork("draws").seed != parent.fork("other").seed
    assert parent.fork("draws").seed != parent.seed


def test_ranges():
    rng = Rng(3)
    closed = {rng.randint(0, 2) for _ in range(500)}
    half_open = {rng.randbelow(3) for _ in range(500)}
    assert closed == {0, 1, 2}
    assert half_open == {0, 1, 2}


def test_from_entropy():
    rng = Rng.from_entropy()
    assert isinstance(rng.seed, int)
    assert 0 <= rng.randbelow(10) < 10
