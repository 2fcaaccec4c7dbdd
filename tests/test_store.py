from roi import InputRecord
from store import InputStore


def test_starts_from_defaults():
    assert InputStore().get() == InputRecord.defaults()


def test_set_replaces_fields_and_returns_snapshot():
    store = InputStore()
    before = store.get()
    after = store.set(loan_amount=0, loan_term=5)
    assert after is store.get()
    assert after.loan_amount == 0 and after.loan_term == 5
    assert before.loan_amount == 59_891
    assert after.pre_degree_salary == before.pre_degree_salary


def test_subscribers_see_every_update():
    store = InputStore()
    seen = []
    store.subscribe(seen.append)
    store.set(signing_bonus=0)
    store.reset()
    assert [r.signing_bonus for r in seen] == [0, 30_000]


def test_reset_restores_defaults():
    store = InputStore(InputRecord.defaults().replace(inflation=0))
    assert store.reset() == InputRecord.defaults()
