import pytest

from mtgsim.mana import (
    NUM_MANA_TYPES,
    X_VALUE_PLACEHOLDER,
    Cost,
    ManaType,
    Payment,
    Pool,
)

PAY_CASES = [
    (
        "exact payment for colored cost",
        Pool({ManaType.RED: 1}),
        Cost(colored={ManaType.RED: 1}),
        Payment({ManaType.RED: 1}),
        True,
        Pool({ManaType.RED: 0}),
    ),
    (
        "payment for generic cost",
        Pool({ManaType.COLORLESS: 2}),
        Cost(generic=2),
        Payment({ManaType.COLORLESS: 2}),
        True,
        Pool(),
    ),
    (
        "colored mana for generic cost",
        Pool({ManaType.BLUE: 2}),
        Cost(generic=2),
        Payment({ManaType.BLUE: 2}),
        True,
        Pool(),
    ),
    (
        "mixed cost with exact payment",
        Pool({ManaType.RED: 1, ManaType.COLORLESS: 2}),
        Cost(colored={ManaType.RED: 1}, generic=2),
        Payment({ManaType.RED: 1, ManaType.COLORLESS: 2}),
        True,
        Pool(),
    ),
    (
        "mixed cost using other colors for generic part",
        Pool({ManaType.RED: 1, ManaType.BLUE: 2}),
        Cost(colored={ManaType.RED: 1}, generic=2),
        Payment({ManaType.RED: 1, ManaType.BLUE: 2}),
        True,
        Pool(),
    ),
    (
        "not enough mana in pool",
        Pool({ManaType.RED: 1}),
        Cost(colored={ManaType.RED: 2}),
        Payment({ManaType.RED: 2}),
        False,
        Pool({ManaType.RED: 1}),
    ),
    (
        "incorrect color paid",
        Pool({ManaType.BLUE: 1}),
        Cost(colored={ManaType.RED: 1}),
        Payment({ManaType.BLUE: 1}),
        False,
        Pool({ManaType.BLUE: 1}),
    ),
    (
        "payment does not match total cost",
        Pool({ManaType.RED: 2}),
        Cost(colored={ManaType.RED: 1}),
        Payment({ManaType.RED: 2}),
        False,
        Pool({ManaType.RED: 2}),
    ),
    (
        "zero cost with zero payment",
        Pool({ManaType.RED: 1}),
        Cost(),
        Payment(),
        True,
        Pool({ManaType.RED: 1}),
    ),
    (
        "zero cost with non-zero payment",
        Pool({ManaType.RED: 1}),
        Cost(),
        Payment({ManaType.RED: 1}),
        False,
        Pool({ManaType.RED: 1}),
    ),
]


@pytest.mark.parametrize(
    "initial, cost, payment, expected_success, expected_pool",
    [case[1:] for case in PAY_CASES],
    ids=[case[0] for case in PAY_CASES],
)
def test_pay(initial, cost, payment, expected_success, expected_pool):
    pool = Pool(list(initial.amounts))
    assert pool.pay(cost, payment) is expected_success
    assert pool == expected_pool


@pytest.mark.parametrize(
    "mana_type, symbol",
    [
        (ManaType.WHITE, "W"),
        (ManaType.BLUE, "U"),
        (ManaType.BLACK, "B"),
        (ManaType.RED, "R"),
        (ManaType.GREEN, "G"),
        (ManaType.COLORLESS, "C"),
    ],
)
def test_mana_type_symbols(mana_type, symbol):
    assert str(mana_type) == symbol
    assert mana_type.symbol == symbol


def test_add_and_total():
    pool = Pool()
    pool.add(ManaType.RED, 2)
    pool.add(ManaType.COLORLESS, 3)
    assert pool.amounts[ManaType.RED] == 2
    assert pool.amounts[ManaType.COLORLESS] == 3
    assert pool.total() == 5


def test_add_ignores_type_past_the_last():
    pool = Pool()
    pool.add(NUM_MANA_TYPES, 4)
    assert pool.total() == 0


def test_add_rejects_negative_type():
    with pytest.raises(ValueError):
        Pool().add(-1, 1)


def test_can_pay():
    pool = Pool({ManaType.RED: 1, ManaType.BLUE: 2})
    assert pool.can_pay(Cost(colored={ManaType.RED: 1}, generic=2))
    assert not pool.can_pay(Cost(colored={ManaType.RED: 1}, generic=3))
    assert not pool.can_pay(Cost(colored={ManaType.GREEN: 1}))


def test_can_pay_does_not_change_pool():
    pool = Pool({ManaType.RED: 1})
    pool.can_pay(Cost(colored={ManaType.RED: 1}))
    assert pool == Pool({ManaType.RED: 1})


def test_cost_normalises_colored_and_total():
    cost = Cost(colored={ManaType.BLUE: 1, ManaType.RED: 1}, generic=2)
    assert len(cost.colored) == NUM_MANA_TYPES - 1
    assert cost.total == 4
    assert Cost() == Cost(colored=[0, 0, 0, 0, 0], generic=X_VALUE_PLACEHOLDER)


def test_cost_rejects_colorless_in_colored():
    with pytest.raises(ValueError):
        Cost(colored={ManaType.COLORLESS: 1})


def test_payment_rejects_wrong_length():
    with pytest.raises(ValueError):
        Payment([1, 2, 3])