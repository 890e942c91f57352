from rustdrill.drills.options import maybe_icecream


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    icecreams = maybe_icecream(12)
    assert icecreams == 5


def test_midnight_and_negative():
    assert maybe_icecream(0) == 5
    assert maybe_icecream(-1) is None