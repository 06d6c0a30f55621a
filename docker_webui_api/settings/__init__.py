"""Подсистема настроек сервиса (config.json + валидация)."""
