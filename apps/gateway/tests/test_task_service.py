"""TaskService 单元测试 -- 直接针对服务层，不经过 HTTP"""

import pytest
from voicetodo.core.exceptions import NotFoundError, ValidationError
from voicetodo.core.models import TaskCreate, TaskPriority, TaskUpdate
from voicetodo.core.store import StoreGroup
from voicetodo.gateway.services.task_service import TaskService


@pytest.fixture
def service(store_group: StoreGroup) -> TaskService:
    return TaskService(store_group)


class TestTaskService:
    async def test_create_defaults_priority_to_normal(self, service: TaskService):
        task = await service.create_task("u1", TaskCreate(title="Buy milk"))
        assert task.priority == TaskPriority.NORMAL
        assert task.created_at == task.updated_at

    @pytest.mark.parametrize("title", ["", "   ", "\n\t"])
    async def test_create_rejects_blank_title(self, service: TaskService, title):
        with pytest.raises(ValidationError):
            await service.create_task("u1", TaskCreate(title=title))
        assert await service.list_tasks("u1") == []

    async def test_update_keeps_untouched_fields(self, service: TaskService, clock):
        task = await service.create_task(
            "u1", TaskCreate(title="x", voice_note_duration="0:05")
        )
        clock.advance(seconds=10)
        updated = await service.update_task("u1", task.task_id, TaskUpdate(completed=True))
        assert updated.completed is True
        assert updated.voice_note_duration == "0:05"
        assert updated.updated_at >= task.updated_at

    async def test_update_with_same_clock_reading(self, service: TaskService):
        """时钟未前进时 updated_at 保持相等"""
        task = await service.create_task("u1", TaskCreate(title="x"))
        updated = await service.update_task("u1", task.task_id, TaskUpdate(title="y"))
        assert updated.updated_at == task.updated_at

    async def test_foreign_task_is_not_found(self, service: TaskService):
        task = await service.create_task("alice", TaskCreate(title="private"))

        assert [t.task_id for t in await service.list_tasks("bob")] == []
        with pytest.raises(NotFoundError):
            await service.get_task("bob", task.task_id)
        with pytest.raises(NotFoundError):
            await service.update_task("bob", task.task_id, TaskUpdate(completed=True))
        with pytest.raises(NotFoundError):
            await service.delete_task("bob", task.task_id)

        assert (await service.get_task("alice", task.task_id)).completed is False

    async def test_delete_twice_is_not_found(self, service: TaskService):
        task = await service.create_task("u1", TaskCreate(title="x"))
        await service.delete_task("u1", task.task_id)
        with pytest.raises(NotFoundError):
            await service.delete_task("u1", task.task_id)

    async def test_due_reminders_scoped_to_user(self, service: TaskService, clock):
        await service.create_task(
            "alice", TaskCreate(title="alice", reminder_date=clock.now)
        )
        bob_task = await service.create_task(
            "bob", TaskCreate(title="bob", reminder_date=clock.now)
        )
        due = await service.list_due_reminders("bob", window_s=0)
        assert [t.task_id for t in due] == [bob_task.task_id]
