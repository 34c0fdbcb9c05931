from __future__ import annotations

import pytest

from customersync.domain.customer_sync import (
    ConflictError,
    CustomerMatcher,
    ExistingDuplicate,
    MatchedByCompanyNumber,
    MatchedByExternalId,
    MatchKey,
    NewDuplicate,
    NoMatch,
)
from tests.support.customers import (
    InMemoryCustomerDataLayer,
    make_external_company,
    make_external_person,
    make_stored_company,
    make_stored_person,
)


def test_company_without_any_match_yields_empty_result(
    data_layer: InMemoryCustomerDataLayer,
) -> None:
    result = CustomerMatcher(data_layer).match(make_external_company("E1", company_number="C1"))

    assert isinstance(result.match, NoMatch)
    assert result.customer is None
    assert result.match_key is MatchKey.NONE
    assert result.duplicates == []
    assert data_layer.operations() == ["find_by_external_id", "find_by_company_number"]


def test_company_matched_by_external_id(data_layer: InMemoryCustomerDataLayer) -> None:
    stored = data_layer.add_existing(make_stored_company("E1", company_number="C1"))

    result = CustomerMatcher(data_layer).match(make_external_company("E1", company_number="C1"))

    assert isinstance(result.match, MatchedByExternalId)
    assert result.customer is stored
    assert result.match_key is MatchKey.EXTERNAL_ID
    assert result.duplicates == []
    assert data_layer.operations() == ["find_by_external_id", "find_by_master_external_id"]


def test_company_external_id_match_collects_duplicate_of_master(
    data_layer: InMemoryCustomerDataLayer,
) -> None:
    stored = data_layer.add_existing(make_stored_company("E1", company_number="C1"))
    duplicate = data_layer.add_existing(
        make_stored_company("D1", company_number="C1-DUP", master_external_id="E1")
    )

    result = CustomerMatcher(data_layer).match(make_external_company("E1", company_number="C1"))

    assert result.customer is stored
    assert len(result.duplicates) == 1
    slot = result.duplicates[0]
    assert isinstance(slot, ExistingDuplicate)
    assert slot.customer is duplicate


def test_company_master_lookup_returning_primary_is_not_a_duplicate(
    data_layer: InMemoryCustomerDataLayer,
) -> None:
    stored = data_layer.add_existing(make_stored_company("E1", company_number="C1"))

    result = CustomerMatcher(data_layer).match(make_external_company("E1", company_number="C1"))

    assert stored.master_external_id == "E1"
    assert result.duplicates == []


def test_company_external_id_match_rejects_person(data_layer: InMemoryCustomerDataLayer) -> None:
    data_layer.add_existing(make_stored_person("E2"))

    with pytest.raises(ConflictError) as excinfo:
        CustomerMatcher(data_layer).match(make_external_company("E2", company_number="C2"))

    assert "E2 already exists and is not a company" in str(excinfo.value)
    assert excinfo.value.external_id == "E2"
    assert data_layer.writes == []


def test_company_number_mismatch_demotes_external_id_match(
    data_layer: InMemoryCustomerDataLayer,
) -> None:
    stored = data_layer.add_existing(make_stored_company("E1", company_number="OTHER"))

    result = CustomerMatcher(data_layer).match(make_external_company("E1", company_number="C1"))

    assert isinstance(result.match, NoMatch)
    assert result.customer is None
    assert result.match_key is MatchKey.NONE
    assert stored.master_external_id is None
    assert stored.external_id == "E1"
    assert [type(slot) for slot in result.duplicates] == [ExistingDuplicate]
    assert result.duplicates[0] == ExistingDuplicate(customer=stored)


def test_company_number_mismatch_keeps_master_duplicate_first(
    data_layer: InMemoryCustomerDataLayer,
) -> None:
    stored = data_layer.add_existing(make_stored_company("E1", company_number="OTHER"))
    duplicate = data_layer.add_existing(
        make_stored_company("D1", company_number="C1-DUP", master_external_id="E1")
    )

    result = CustomerMatcher(data_layer).match(make_external_company("E1", company_number="C1"))

    demoted = [slot.customer for slot in result.duplicates if isinstance(slot, ExistingDuplicate)]
    assert demoted == [duplicate, stored]


def test_company_matched_by_company_number_is_relinked(
    data_layer: InMemoryCustomerDataLayer,
) -> None:
    stored = data_layer.add_existing(make_stored_company(None, company_number="C9"))

    result = CustomerMatcher(data_layer).match(make_external_company("E9", company_number="C9"))

    assert isinstance(result.match, MatchedByCompanyNumber)
    assert result.customer is stored
    assert result.match_key is MatchKey.COMPANY_NUMBER
    assert stored.external_id == "E9"
    assert stored.master_external_id == "E9"
    assert result.duplicates == [NewDuplicate()]


def test_company_number_match_with_same_external_id_is_allowed(
    data_layer: InMemoryCustomerDataLayer,
) -> None:
    stored = make_stored_company(None, company_number="C9")
    data_layer.add_existing(stored)
    stored.external_id = "E9"

    # external id lookup is bypassed by a data layer that only knows company numbers
    data_layer.find_by_external_id = lambda _external_id: None  # type: ignore[method-assign]

    result = CustomerMatcher(data_layer).match(make_external_company("E9", company_number="C9"))

    assert result.customer is stored
    assert result.match_key is MatchKey.COMPANY_NUMBER


def test_company_number_match_with_other_external_id_conflicts(
    data_layer: InMemoryCustomerDataLayer,
) -> None:
    stored = data_layer.add_existing(make_stored_company("E-OTHER", company_number="C9"))

    with pytest.raises(ConflictError) as excinfo:
        CustomerMatcher(data_layer).match(make_external_company("E9", company_number="C9"))

    message = str(excinfo.value)
    assert "C9 doesn't match external id E9 instead found E-OTHER" in message
    assert stored.external_id == "E-OTHER"
    assert data_layer.writes == []


def test_company_number_match_rejects_person(data_layer: InMemoryCustomerDataLayer) -> None:
    person = make_stored_person(None)
    person.company_number = "C5"
    data_layer.add_existing(person)

    with pytest.raises(ConflictError):
        CustomerMatcher(data_layer).match(make_external_company("E5", company_number="C5"))

    assert person.external_id is None


def test_person_without_match_yields_empty_result(data_layer: InMemoryCustomerDataLayer) -> None:
    result = CustomerMatcher(data_layer).match(make_external_person("P1"))

    assert isinstance(result.match, NoMatch)
    assert result.duplicates == []
    assert data_layer.operations() == ["find_by_external_id"]


def test_person_matched_by_external_id_only(data_layer: InMemoryCustomerDataLayer) -> None:
    stored = data_layer.add_existing(make_stored_person("P1"))

    result = CustomerMatcher(data_layer).match(make_external_person("P1"))

    assert isinstance(result.match, MatchedByExternalId)
    assert result.customer is stored
    assert result.duplicates == []
    assert data_layer.operations() == ["find_by_external_id"]


def test_person_external_id_match_rejects_company(data_layer: InMemoryCustomerDataLayer) -> None:
    data_layer.add_existing(make_stored_company("P1", company_number="C1"))

    with pytest.raises(ConflictError) as excinfo:
        CustomerMatcher(data_layer).match(make_external_person("P1"))

    assert "P1 already exists and is not a person" in str(excinfo.value)
