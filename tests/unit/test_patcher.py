"""Tests for in-place approval patching."""

import json

from app.cache import CacheStore, EntryKind, TransactionCachePatcher


def patch(store, transaction_id="t1", value=True):
    return TransactionCachePatcher(store).update_cache_by_transaction_id(transaction_id, value)


class TestTransactionList:
    def test_flips_target_only(self, store):
        store["transactions"] = '[{"id":"t1","approved":false},{"id":"t2","approved":false}]'
        assert patch(store) == 1
        assert json.loads(store["transactions"]) == [
            {"id": "t1", "approved": True},
            {"id": "t2", "approved": False},
        ]

    def test_other_fields_kept(self, store):
        store["transactions"] = '[{"id":"t1","amount":5,"merchant":"Cafe","approved":true}]'
        patch(store, value=False)
        assert json.loads(store["transactions"]) == [{"id": "t1", "amount": 5, "merchant": "Cafe", "approved": False}]

    def test_untouched_without_target(self, store):
        payload = '[{"id":"t2","approved":false}]'
        store["transactions"] = payload
        assert patch(store) == 0
        assert store["transactions"] == payload

    def test_tag_kept(self, store):
        store["transactions"] = '[{"id":"t1","approved":false}]'
        patch(store)
        assert store.get("transactions").kind == EntryKind.TRANSACTIONS


class TestPaginated:
    def test_data_patched_and_cursor_kept(self, store):
        store["transactions-paginated"] = '{"data":[{"id":"t1","approved":false}],"nextPage":2}'
        assert patch(store) == 1
        assert json.loads(store["transactions-paginated"]) == {
            "data": [{"id": "t1", "approved": True}],
            "nextPage": 2,
        }

    def test_list_and_page_stay_consistent(self, store):
        store['transactionsByEmployee@{"employeeId":"e1"}'] = '[{"id":"t1","approved":false}]'
        store['paginatedTransactions@{"page":null}'] = '{"data":[{"id":"t1","approved":false}],"nextPage":null}'
        assert patch(store) == 2
        flat = json.loads(store['transactionsByEmployee@{"employeeId":"e1"}'])
        page = json.loads(store['paginatedTransactions@{"page":null}'])
        assert flat[0]["approved"] is page["data"][0]["approved"] is True

    def test_empty_container(self, store):
        store["page"] = '{"data":[],"nextPage":null}'
        assert patch(store) == 0
        assert store["page"] == '{"data":[],"nextPage":null}'


class TestSkipped:
    def test_employee_key_never_modified(self, store):
        payload = '[{"id":"t1","approved":false}]'
        store.put("employee", payload, kind=EntryKind.TRANSACTIONS)
        patch(store)
        assert store["employee"] == payload

    def test_employee_entries_never_modified(self, store):
        payload = '[{"id":"t1","firstName":"A","lastName":"B"}]'
        store["employees"] = payload
        patch(store)
        assert store["employees"] == payload

    def test_unrecognized_shape(self, store):
        payload = '{"items":[{"id":"t1","approved":false}]}'
        store["other"] = payload
        assert patch(store) == 0
        assert store["other"] == payload

    def test_absent_store(self):
        assert patch(CacheStore(initialized=False)) == 0


class TestMalformedIsolation:
    def test_bad_entry_does_not_abort(self, store):
        store["a"] = '[{"id":"t1","approved":false}]'
        store.put("b", "{broken", kind=EntryKind.TRANSACTIONS)
        store["c"] = '{"data":[{"id":"t1","approved":false}]}'
        assert patch(store) == 2
        assert json.loads(store["a"])[0]["approved"] is True
        assert json.loads(store["c"])["data"][0]["approved"] is True
        assert store["b"] == "{broken"

    def test_raw_malformed_entry(self, store):
        store["bad"] = "not json"
        store["good"] = '[{"id":"t1","approved":false}]'
        assert patch(store) == 1
        assert store["bad"] == "not json"

    def test_tag_mismatch_skipped(self, store):
        store.put("x", '{"data":[{"id":"t1","approved":false}]}', kind=EntryKind.TRANSACTIONS)
        store.put("y", '[{"id":"t1","approved":false}]', kind=EntryKind.PAGINATED_TRANSACTIONS)
        assert patch(store) == 0

    def test_non_object_elements_kept(self, store):
        store["t"] = '[null,"t1",{"id":"t1","approved":false}]'
        patch(store)
        assert json.loads(store["t"]) == [None, "t1", {"id": "t1", "approved": True}]
