"""Payment record storage"""

import logging
from datetime import datetime, timezone
from typing import Any

from pymongo.collection import Collection

from .base import insert_result, serialize_value, store_errors

logger = logging.getLogger(__name__)

# One row per payer: total paid, number of payments, latest payment date
PAYER_SUMMARY_PIPELINE: list[dict[str, Any]] = [
    {
        "$group": {
            "_id": "$payer",
            "totalAmount": {"$sum": "$amount"},
            "paymentCount": {"$sum": 1},
            "lastPaymentDate": {"$max": "$date"},
        }
    },
]


class PaymentDatabase:
    """Write-once payment records"""

    def __init__(self, collection: Collection):
        self.collection = collection

    def save_payment(self, payment: dict[str, Any]) -> dict:
        """
        Persist a payment record.

        The record is trusted as sent; nothing checks that a matching
        payment intent succeeded. A missing date is filled with now (UTC).
        """
        document = dict(payment)
        if document.get("date") is None:
            document["date"] = datetime.now(timezone.utc)

        with store_errors("save payment"):
            result = self.collection.insert_one(document)

        logger.info(
            f"Payment {result.inserted_id} saved: payer={document.get('payer')}, "
            f"amount={document.get('amount')}"
        )
        return insert_result(result)

    def payer_summary(self) -> list[dict]:
        """Totals per payer; order across payers is not defined"""
        with store_errors("summarize payments"):
            groups = list(self.collection.aggregate(PAYER_SUMMARY_PIPELINE))

        return [
            {
                "payer": group["_id"],
                "totalAmount": group["totalAmount"],
                "paymentCount": group["paymentCount"],
                "lastPaymentDate": serialize_value(group.get("lastPaymentDate")),
            }
            for group in groups
        ]
