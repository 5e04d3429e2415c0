from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from errors import ValidationError

PLAYER_IDS_ERROR = 'player_ids is required and must be a non-empty array'
SUCCESS_MESSAGE = 'SOS notification sent'

# Marks a provider response that carried no recipients field at all
_MISSING = object()


@dataclass
class AlertRequest:
    player_ids: List[str]
    message: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Any) -> 'AlertRequest':
        """
        Build a request from a parsed JSON body.
        Anything other than a JSON object counts as having no player_ids.
        """
        if not isinstance(data, dict):
            data = {}

        player_ids = data.get('player_ids')
        if not player_ids or not isinstance(player_ids, list):
            raise ValidationError(PLAYER_IDS_ERROR)

        return cls(player_ids=player_ids, message=data.get('message'))


@dataclass
class AlertResult:
    success: bool
    recipients: Any = field(default=_MISSING)
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def sent(cls, provider_response: Dict[str, Any]) -> 'AlertResult':
        return cls(
            success=True,
            recipients=(
                provider_response.get('recipients', _MISSING)
                if isinstance(provider_response, dict) else _MISSING
            ),
            message=SUCCESS_MESSAGE,
        )

    @classmethod
    def failed(cls, error: str) -> 'AlertResult':
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {'success': False, 'error': self.error}

        result: Dict[str, Any] = {'success': True}
        if self.recipients is not _MISSING:
            result['recipients'] = self.recipients
        result['message'] = self.message
        return result
