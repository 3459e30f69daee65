"""Unit tests for the authorization service."""

from unittest.mock import MagicMock

import pytest

from iso8583_mock.core.security.pan_masking import PanMasker
from iso8583_mock.domain.models.transaction import Transaction
from iso8583_mock.persistence.transaction_store import TransactionStore
from iso8583_mock.schemas.messages import AuthorizationRequest, AuthorizationResponse
from iso8583_mock.services.approval_policy import PanPrefixPolicy
from iso8583_mock.services.authorization_service import AuthorizationService
from tests.utils.messages import (
    AUTHORIZATION_ECHO_FIELDS,
    DECLINED_PAN,
    authorization_payload,
)


class TestAuthorizationService:
    """Test AuthorizationService class."""

    def test_service_creation_defaults(self, store):
        """Test the service falls back to the "4" prefix policy and masking."""
        service = AuthorizationService(store)
        assert service.store is store
        assert isinstance(service.policy, PanPrefixPolicy)
        assert isinstance(service.masker, PanMasker)

    def test_approves_pan_starting_with_4(self, store, authorization_request):
        """Test MTI 0100 with a "4" PAN is approved and stored."""
        response = AuthorizationService(store).authorize(authorization_request)

        assert isinstance(response, AuthorizationResponse)
        assert response.mti == "0110"
        assert response.de39 == "00"
        assert response.response_message == "Transaction Approved"
        assert store.get("100001") == Transaction(
            pan="4111111111111111",
            amount="000000010000",
            stan="100001",
            timestamp="1018143000",
            response_code="00",
        )

    def test_declines_other_pans_without_storing(self, store):
        """Test MTI 0100 with a non-"4" PAN is declined and not stored."""
        request = AuthorizationRequest(**authorization_payload(de2=DECLINED_PAN, de11="100002"))

        response = AuthorizationService(store).authorize(request)

        assert response.mti == "0110"
        assert response.de39 == "05"
        assert response.response_message == "Transaction Not Authorized"
        assert store.exists("100002") is False
        assert len(store) == 0

    @pytest.mark.parametrize("mti", ["0200", "0400", "0110", "", "100"])
    def test_invalid_mti(self, store, mti):
        """Test any MTI other than 0100 yields 03 and leaves the store alone."""
        request = AuthorizationRequest(**authorization_payload(mti=mti))

        response = AuthorizationService(store).authorize(request)

        assert response.mti == "0110"
        assert response.de39 == "03"
        assert response.response_message == "Invalid MTI for Authorization Request"
        assert len(store) == 0

    def test_invalid_mti_does_not_consult_policy_or_store(self):
        """Test the MTI check short-circuits before the decision rule."""
        store = MagicMock(spec=TransactionStore)
        policy = MagicMock()
        request = AuthorizationRequest(**authorization_payload(mti="0200"))

        AuthorizationService(store, policy=policy).authorize(request)

        policy.approves.assert_not_called()
        store.put.assert_not_called()
        store.exists.assert_not_called()

    def test_all_fields_echoed(self, store):
        """Test every request data element is echoed unchanged."""
        payload = authorization_payload(de48="ABC 123", de61="  padded  ")
        response = AuthorizationService(store).authorize(AuthorizationRequest(**payload))

        for field in AUTHORIZATION_ECHO_FIELDS:
            assert getattr(response, field) == payload[field]

    def test_fields_echoed_on_invalid_mti(self, store):
        """Test echoing also happens on the 03 path."""
        payload = authorization_payload(mti="0200")
        response = AuthorizationService(store).authorize(AuthorizationRequest(**payload))

        for field in AUTHORIZATION_ECHO_FIELDS:
            assert getattr(response, field) == payload[field]

    def test_reauthorizing_same_stan_overwrites(self, store):
        """Test a later approval under the same STAN replaces the stored record."""
        service = AuthorizationService(store)
        service.authorize(AuthorizationRequest(**authorization_payload(de4="000000000100")))
        service.authorize(AuthorizationRequest(**authorization_payload(de4="000000000200")))

        assert len(store) == 1
        assert store.get("100001").amount == "000000000200"

    def test_decline_after_approval_keeps_original(self, store):
        """Test a declined request reusing an approved STAN does not remove it."""
        service = AuthorizationService(store)
        service.authorize(AuthorizationRequest(**authorization_payload()))
        service.authorize(AuthorizationRequest(**authorization_payload(de2=DECLINED_PAN)))

        assert store.get("100001").pan == "4111111111111111"

    def test_custom_policy_is_used(self, store):
        """Test the injected policy decides the outcome."""
        service = AuthorizationService(store, policy=PanPrefixPolicy(["55"]))

        approved = service.authorize(AuthorizationRequest(**authorization_payload(de2=DECLINED_PAN)))
        declined = service.authorize(
            AuthorizationRequest(**authorization_payload(de11="100003"))
        )

        assert approved.de39 == "00"
        assert declined.de39 == "05"
        assert store.exists("100001")
        assert not store.exists("100003")

    def test_request_and_response_logged_with_masked_pan(self, store, authorization_request):
        """Test both messages are logged and the PAN is masked."""
        service = AuthorizationService(store)
        mock_logger = MagicMock()

        with pytest.MonkeyPatch.context() as mp:
            mp.setattr(AuthorizationService, "logger", mock_logger)
            service.authorize(authorization_request)

        events = [c.args[0] for c in mock_logger.info.call_args_list]
        assert events == ["authorization_request", "authorization_response"]
        for c in mock_logger.info.call_args_list:
            assert c.kwargs["de2"] == "411111******1111"
