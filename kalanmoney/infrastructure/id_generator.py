"""Identifier generation backed by random UUIDs."""

import uuid

from kalanmoney.application.ports.id_generator import IdGeneratorPort


class Uuid4IdGenerator(IdGeneratorPort):
    """Produce random UUID4 strings."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


__all__ = ["Uuid4IdGenerator"]
