from decimal import Decimal
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import BadRequestError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.restaurant_metrics import metrics
from src.service.restaurant.domain.entity.transaction_entity import Transaction


class CreateTransactionUseCase:
    """
    Record a payment against a bill.

    The bill's final amount is recomputed (total + tax - discount) and saved
    together with the transaction in one unit of work. The payment does not
    reduce the bill's final amount.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create(self, *, bill_id: UUID, amount: Decimal, payment_method: str) -> Transaction:
        async with self.uow:
            bill = await self.uow.bill_repo.get_by_id(bill_id)
            if not bill:
                raise NotFoundError(f'Bill not found with ID: {bill_id}')

            try:
                bill.ensure_covers(amount)
            except BadRequestError:
                metrics.record_transaction(
                    payment_method=payment_method, result='insufficient_funds'
                )
                raise

            transaction = Transaction.create(
                bill_id=bill_id, amount=amount, payment_method=payment_method
            )
            bill.calculate_final_amount()
            await self.uow.bill_repo.update(bill)
            saved = await self.uow.transaction_repo.create(transaction)
            await self.uow.commit()

        metrics.record_transaction(payment_method=payment_method, result='accepted')
        Logger.base.info(f'💳 [TRANSACTION] {saved.id} paid {amount} on bill {bill_id}')
        return saved
