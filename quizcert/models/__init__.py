from quizcert.models.base import Base, get_db
from quizcert.models.certificate import Certificate

__all__ = ["Base", "Certificate", "get_db"]
