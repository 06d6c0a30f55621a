"""Функции доступа к Docker Engine, сгруппированные по типам объектов."""
