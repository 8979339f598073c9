import pytest
from saluschart import DomainError, LinearScale


def test_linear_scale():
    scale = LinearScale((0, 100), (0, 10))
    assert scale.map(0) == 0
    assert scale.map(50) == 5
    assert scale.map(100) == 10


def test_inverted_range():
    scale = LinearScale((0, 50), (200, 0))
    assert scale.map(0) == 200
    assert scale.map(50) == 0
    assert scale.map(25) == 100


def test_empty_domain_raises():
    with pytest.raises(DomainError):
        LinearScale((4, 4), (0, 100)).map(4)


def test_linear_scale_ticks():
    scale = LinearScale((0, 100), (0, 400))
    ticks = scale.ticks(count=5)
    assert len(ticks) == 6
    assert ticks[0] == 0
    assert ticks[-1] == 100


def test_ticks_accept_reversed_domain():
    assert LinearScale((100, 0), (0, 1)).ticks() == LinearScale((0, 100), (0, 1)).ticks()
