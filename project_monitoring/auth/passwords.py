from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(hashed_password: str | None, password: str) -> bool:
    if not hashed_password:
        return False
    return check_password_hash(hashed_password, password)
