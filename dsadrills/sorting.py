"""Classic comparison sorts; each returns a new sorted list."""


def bubble_sort(values):
    """Sort by repeatedly swapping neighbours, stopping once a pass swaps nothing."""
    result = list(values)
    for rounds in range(1, len(result)):
        swapped = False
        for j in range(len(result) - rounds):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort_steps(values):
    """Yield the list after each value from the second onwards is inserted."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and current < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
        yield list(result)


def insertion_sort(values):
    """Sort by inserting each value into the sorted part on its left."""
    result = list(values)
    for result in insertion_sort_steps(result):
        pass
    return result


def selection_sort(values):
    """Sort by moving the smallest remaining value to the front each round."""
    result = list(values)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values):
    """Sort by splitting in halves, sorting each and merging them."""
    values = list(values)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))