import pytest

from courier.models import Order


@pytest.fixture
def ana():
    return Order("Ana", "X-080", [3, 4, 6])


@pytest.fixture
def bob():
    return Order("Bob", "X-080", [9])


@pytest.fixture
def mixed_orders():
    """Orders spread over several zones and urgencies"""
    return [
        Order("Eugenia", "MAD-120", [1, 2, 12]),   # zone 120, urgency 12 * 4 = 48
        Order("carlos", "BCN-045", [3, 3]),        # zone 45, urgency 6 * 2 = 12
        Order("Carlos", "BCN-045", [6]),           # zone 45, urgency 6 * 2 = 12
        Order("Lucia", "VAL-099", []),             # zone 99, urgency 0
        Order("Pedro", "SEV-120", [4, 5]),         # zone 120, urgency 0
        Order("Tom", "ZAR-150", [9, 10]),          # zone 150, urgency 9 * 1 = 9
        Order("Brynn", "ZAR-150", [3, 6, 9]),      # zone 150, urgency 0
    ]
