from typing import List, Tuple

from account_service.core.config import Settings
from account_service.core.logging import configure_logging
from account_service.domain.models import Account
from account_service.domain.ports.persistence import AccountRepository
from account_service.domain.ports.security import PasswordHasher
from account_service.infrastructure.persistence.sqlite import SQLitePersistence
from account_service.infrastructure.security.password import BcryptPasswordHasher

SEED_ACCOUNTS: List[Tuple[str, str, str]] = [
    ("Admin User", "admin@example.com", "Admin@123"),
    ("Test User", "test@example.com", "Test@123"),
]


def seed_users(accounts: AccountRepository, hasher: PasswordHasher) -> List[Account]:
    """Create the seed accounts unless the store already holds any account."""
    if accounts.count_accounts() > 0:
        print("Users already seeded, skipping...")
        return []

    created = []
    for name, email, password in SEED_ACCOUNTS:
        account = Account.create(name=name, email=email, password_hash=hasher.hash(password))
        created.append(accounts.create_account(account))

    print("Users seeded successfully!")
    for name, email, password in SEED_ACCOUNTS:
        print(f"{name}: {email} / {password}")
    return created


def main() -> None:
    configure_logging()
    settings = Settings()
    persistence = SQLitePersistence(settings.database_path)
    try:
        seed_users(persistence, BcryptPasswordHasher(rounds=settings.bcrypt_rounds))
    finally:
        persistence.close()


if __name__ == "__main__":
    main()
