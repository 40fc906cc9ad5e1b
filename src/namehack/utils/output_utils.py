def format_result(result, available_only):
    if available_only:
        return f"{result.candidate}\n"
    return f"{result.candidate}\t{result.status}\n"


def write_result(handle, result, available_only):
    """Writes one result line; returns False when the result is filtered out."""
    if available_only and not result.available:
        return False
    handle.write(format_result(result, available_only))
    return True
