"""Server — ASGI request pipeline and pounce hosting."""
