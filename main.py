#!/usr/bin/env python3
"""
hostsfile - 主入口点

解析并校验静态 hosts 文件，输出其中的有效记录。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostsfile 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostsfile import Config, CouldNotOpen, HostsApp


def main() -> None:
    """主入口点"""

    # 从环境变量加载配置
    config = Config.from_env()

    try:
        app = HostsApp(config)
    except ValueError as e:
        print(f"初始化 hostsfile 失败: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        app.run()
    except CouldNotOpen:
        sys.exit(1)
    except KeyboardInterrupt:
        app.logger.info("被用户中断")
        sys.exit(0)
    except Exception as e:
        app.logger.error(f"致命错误: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
