"""CLI 入口模块 -- python -m voicetodo.gateway

使用 uvicorn 在 VOICETODO_HOST:VOICETODO_PORT 上启动服务。
"""

import uvicorn

from .config import load_gateway_config


def main() -> None:
    config = load_gateway_config()
    uvicorn.run(
        "voicetodo.gateway.main:app",
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
