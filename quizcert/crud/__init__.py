from quizcert.crud.certificate import (
    create_certificate,
    get_certificate_by_id,
    get_certificates_by_user_id,
)

__all__ = [
    "create_certificate",
    "get_certificate_by_id",
    "get_certificates_by_user_id",
]
