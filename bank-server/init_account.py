"""
Seed demo users and funded accounts.

alice and bob each get a USD and an EUR account holding 1000, with an
opening ledger entry so balances reconcile with the entries table.
"""
import asyncio

from bank.core.config import get_settings
from bank.core.logging import setup_logging
from bank.infrastructure.database import Database
from bank.infrastructure.database.repositories.account_repository import SqlAccountRepository
from bank.infrastructure.database.repositories.entry_repository import SqlEntryRepository
from bank.modules.accounts.service import AccountService
from bank.modules.users import UserCreateInput, UsernameAlreadyExistsError
from bank.modules.users.service import UserService

DEMO_USERS = {
    "alice": ("Alice Liddell", "alice@example.com"),
    "bob": ("Bob Builder", "bob@example.com"),
}
DEMO_PASSWORD = "secret123"
OPENING_BALANCE = "1000"
CURRENCIES = ("USD", "EUR")


async def create_demo_accounts() -> None:
    settings = get_settings()
    setup_logging(settings)
    database = Database(settings.database)
    await database.create_all()

    try:
        for username, (full_name, email) in DEMO_USERS.items():
            async with database.unit_of_work() as session:
                try:
                    await UserService.with_session(session).create_user(
                        UserCreateInput(
                            username=username,
                            password=DEMO_PASSWORD,
                            full_name=full_name,
                            email=email,
                        )
                    )
                except UsernameAlreadyExistsError:
                    print(f"{username} already exists, skipping")
                    continue

                accounts = AccountService.with_session(session)
                repository = SqlAccountRepository(session)
                entries = SqlEntryRepository(session)
                for currency in CURRENCIES:
                    account = await accounts.create_account(username, currency)
                    await repository.set_balance(account.id, OPENING_BALANCE)
                    await entries.create(account_id=account.id, amount=OPENING_BALANCE)
                    print(f"{username}: account {account.id} {currency} {OPENING_BALANCE}")

            print(f"Demo user created: {username} / {DEMO_PASSWORD}")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(create_demo_accounts())
