"""Вспомогательные утилиты сервиса."""
