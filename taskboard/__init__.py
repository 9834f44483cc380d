"""Taskboard: 项目与任务看板"""

__version__ = "0.1.0"
