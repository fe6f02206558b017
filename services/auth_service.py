from passlib.hash import pbkdf2_sha256


def hash_password(password: str) -> str:
    return pbkdf2_sha256.hash(password)


def is_hashed(value: str) -> bool:
    return bool(value) and pbkdf2_sha256.identify(value)


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not is_hashed(password_hash):
        return False
    return pbkdf2_sha256.verify(password, password_hash)


def prepare_password(password: str) -> str:
    """Gera o hash de uma senha em texto puro; um hash já pronto é mantido."""
    if is_hashed(password):
        return password
    return hash_password(password)


__all__ = ["hash_password", "is_hashed", "verify_password", "prepare_password"]
