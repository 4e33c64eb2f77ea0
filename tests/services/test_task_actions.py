import pytest

from dentalize.services import task_actions


@pytest.mark.asyncio
async def test_create_returns_success_marker(session, owner) -> None:
    result = await task_actions.create_task(
        session, owner.id, {"title": "Checkup", "start_time": "2024-06-10T09:00", "end_time": "2024-06-10T09:30"}
    )

    assert result["success"] is True
    assert isinstance(result["id"], int)


@pytest.mark.asyncio
async def test_errors_come_back_as_a_single_message(session, owner) -> None:
    await task_actions.create_task(
        session, owner.id, {"title": "Checkup", "start_time": "2024-06-10T09:00", "end_time": "2024-06-10T09:30"}
    )

    overlap = await task_actions.create_task(
        session, owner.id, {"title": "Filling", "start_time": "2024-06-10T09:15", "end_time": "2024-06-10T09:45"}
    )
    early = await task_actions.create_task(
        session, owner.id, {"title": "Filling", "start_time": "2024-06-10T05:00", "end_time": "2024-06-10T05:30"}
    )
    missing_title = await task_actions.create_task(session, owner.id, {"start_time": "2024-06-10T12:00"})

    assert overlap == {"error": "An appointment already exists in this time slot"}
    assert early == {"error": "Start time cannot be before 7:00"}
    assert missing_title == {"error": "Title is required"}


@pytest.mark.asyncio
async def test_update_and_delete(session, owner, other_owner) -> None:
    created = await task_actions.create_task(
        session, owner.id, {"title": "Checkup", "start_time": "2024-06-10T09:00", "end_time": "2024-06-10T09:30"}
    )

    moved = await task_actions.update_task(
        session, owner.id, created["id"], {"title": "Checkup", "start_time": "2024-06-10T09:10", "duration_minutes": 30}
    )
    foreign = await task_actions.update_task(
        session, other_owner.id, created["id"], {"title": "Checkup", "start_time": "2024-06-10T15:00"}
    )

    assert moved == {"success": True, "id": created["id"]}
    assert foreign == {"error": "Appointment not found"}
    assert await task_actions.delete_task(session, owner.id, created["id"]) == {"success": True}
    assert await task_actions.delete_task(session, owner.id, created["id"]) == {"success": True}
