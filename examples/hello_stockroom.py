import logging

import stockroom
from stockroom import InMemoryRegistry, StoredRecord


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    reg = InMemoryRegistry()
    reg.add(StoredRecord("ITEM010", "Relay", "Aisle 1, Shelf 2"))
    reg.add(StoredRecord("ITEM011", "Relay", "Aisle 4, Shelf 1"))
    reg.add(StoredRecord("ITEM012", "Capacitor", "Aisle 1, Shelf 7"))

    # Both relays stay listed; ties are ordered by id.
    print(stockroom.format_listing(reg.list_by_description()))

    reg.remove("ITEM010")
    print(stockroom.format_listing(reg.iter_by_description()))


if __name__ == "__main__":
    main()
