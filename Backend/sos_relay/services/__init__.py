from services.onesignal_notifier import OneSignalNotifier

__all__ = ['OneSignalNotifier']
