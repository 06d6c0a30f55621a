"""HTTP-маршруты сервиса."""
