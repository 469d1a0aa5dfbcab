from fastapi import HTTPException

def reject_nulls(changes: dict, required_fields) -> dict:
    """Partial updates may omit a required field but never clear it."""
    cleared = [field for field in required_fields if field in changes and changes[field] is None]
    if cleared:
        raise HTTPException(
            status_code=400,
            detail=f"Required fields cannot be null: {', '.join(cleared)}"
        )
    return changes
