from models.sos import AlertRequest, AlertResult

__all__ = ['AlertRequest', 'AlertResult']
