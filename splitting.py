# splitting.py


def split_into_lots(total, lot_size=None):
    """Partition ``total`` servings into chunks of at most ``lot_size``.

    Without a usable ``lot_size`` (None, 0, or not smaller than ``total``)
    the whole donation is one lot. Otherwise full chunks come first and the
    remainder, if any, is the last, smaller lot:

    >>> split_into_lots(250, 100)
    [100, 100, 50]
    """
    if not lot_size or lot_size >= total:
        return [total]

    lots = []
    remaining = total
    while remaining > 0:
        size = min(lot_size, remaining)
        lots.append(size)
        remaining -= size
    return lots
