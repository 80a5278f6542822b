"""全局 pytest 配置 -- 可控时钟 fixture + 测试环境变量"""

from datetime import UTC, datetime, timedelta

import pytest


class FakeClock:
    """可手动推进的时钟，替代 datetime.now(UTC)"""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """从固定时间点开始的可控时钟"""
    return FakeClock(datetime(2026, 1, 15, 9, 0, tzinfo=UTC))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    """测试中关闭 Logfire，并清除可能影响默认值的环境变量"""
    monkeypatch.setenv("LOGFIRE_SEND_TO_LOGFIRE", "false")
    for key in [
        "VOICETODO_ENV",
        "VOICETODO_ADMIN_USERNAME",
        "VOICETODO_ADMIN_PASSWORD",
        "VOICETODO_SESSION_TTL_HOURS",
        "VOICETODO_REMINDER_WINDOW_S",
    ]:
        monkeypatch.delenv(key, raising=False)
