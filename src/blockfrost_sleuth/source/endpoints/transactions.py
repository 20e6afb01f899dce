"""Transaction submission."""

CBOR_HEADERS = {"Content-Type": "application/cbor"}


class TransactionsEndpoints:
    def transactions_submit(self, transaction_data: bytes) -> str:
        """Submit a CBOR-serialized transaction and return its id.

        Goes through the retrying dispatcher: a 429 answer is retried
        with the client's retry settings.
        """
        return self._post("/tx/submit", str, data=transaction_data, headers=CBOR_HEADERS)
