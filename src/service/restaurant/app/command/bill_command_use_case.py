from decimal import Decimal
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_bill_repo import IBillRepo
from src.service.restaurant.domain.entity.bill_entity import Bill


class BillCommandUseCase:
    def __init__(self, *, bill_repo: IBillRepo) -> None:
        self.bill_repo = bill_repo

    @classmethod
    @inject
    def depends(cls, bill_repo: IBillRepo = Depends(Provide[Container.bill_repo])) -> Self:
        return cls(bill_repo=bill_repo)

    @Logger.io
    async def create_bill(
        self, *, order_id: UUID, total_amount: Decimal, tax: Decimal, discount: Decimal
    ) -> Bill:
        if await self.bill_repo.get_by_order_id(order_id):
            raise ConflictError('Bill already exists for order.')

        bill = Bill.create(order_id=order_id, total_amount=total_amount, tax=tax, discount=discount)
        created = await self.bill_repo.create(bill)
        Logger.base.info(f'🧾 [BILL] Created bill {created.id} final={created.final_amount}')
        return created

    @Logger.io
    async def update_bill(
        self,
        *,
        bill_id: UUID,
        order_id: UUID,
        total_amount: Decimal,
        tax: Decimal,
        discount: Decimal,
    ) -> Bill:
        bill = await self.bill_repo.get_by_id(bill_id)
        if not bill:
            raise NotFoundError(f'Bill not found with ID: {bill_id}')

        if order_id != bill.order_id and await self.bill_repo.get_by_order_id(order_id):
            raise ConflictError('Bill already exists for order.')

        bill.apply_changes(
            order_id=order_id, total_amount=total_amount, tax=tax, discount=discount
        )
        return await self.bill_repo.update(bill)

    @Logger.io
    async def delete_bill(self, *, bill_id: UUID) -> None:
        if not await self.bill_repo.get_by_id(bill_id):
            raise NotFoundError(f'Bill not found with ID: {bill_id}')
        await self.bill_repo.delete(bill_id)
