import pytest

from errors import ValidationError
from models.sos import AlertRequest, AlertResult, PLAYER_IDS_ERROR


class TestAlertRequest:
    """Tests for AlertRequest.from_payload"""

    def test_valid_payload(self):
        alert = AlertRequest.from_payload({'player_ids': ['p1', 'p2'], 'message': 'Help!'})

        assert alert.player_ids == ['p1', 'p2']
        assert alert.message == 'Help!'

    def test_message_optional(self):
        alert = AlertRequest.from_payload({'player_ids': ['p1']})
        assert alert.message is None

    def test_player_ids_order_preserved(self):
        ids = ['c', 'a', 'b']
        assert AlertRequest.from_payload({'player_ids': ids}).player_ids == ids

    @pytest.mark.parametrize('payload', [
        {},
        {'player_ids': None},
        {'player_ids': []},
        {'player_ids': 'p1'},
        {'player_ids': {'id': 'p1'}},
        {'player_ids': 42},
        {'message': 'Help!'},
    ])
    def test_invalid_player_ids(self, payload):
        with pytest.raises(ValidationError) as exc_info:
            AlertRequest.from_payload(payload)

        assert str(exc_info.value) == PLAYER_IDS_ERROR

    @pytest.mark.parametrize('payload', [None, [], ['p1'], 'text', 7])
    def test_non_object_body(self, payload):
        with pytest.raises(ValidationError):
            AlertRequest.from_payload(payload)


class TestAlertResult:
    """Tests for AlertResult serialization"""

    def test_sent(self):
        result = AlertResult.sent({'id': 'n-1', 'recipients': 2})

        assert result.to_dict() == {
            'success': True,
            'recipients': 2,
            'message': 'SOS notification sent'
        }

    def test_sent_without_recipients_field(self):
        data = AlertResult.sent({'id': 'n-1'}).to_dict()

        assert 'recipients' not in data
        assert data['success'] is True

    def test_sent_with_null_recipients(self):
        data = AlertResult.sent({'recipients': None}).to_dict()
        assert data['recipients'] is None

    def test_failed(self):
        assert AlertResult.failed('boom').to_dict() == {'success': False, 'error': 'boom'}
