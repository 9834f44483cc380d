"""
枚举定义模块
包含看板状态与任务优先级
"""
import enum


class TaskStatus(str, enum.Enum):
    """看板任务状态枚举，值即为持久化的大写字符串"""
    TO_DO = "TO DO"                           # 待办
    WORKING_PROGRESS = "WORKING PROGRESS"     # 进行中
    UNDER_REVIEW = "UNDER REVIEW"             # 审核中
    COMPLETED = "COMPLETED"                   # 已完成

    @classmethod
    def from_str(cls, value: str) -> "TaskStatus":
        """大小写不敏感地解析状态，无法识别时抛出 ValueError"""
        return cls(value.strip().upper())


class TaskPriority(str, enum.Enum):
    """任务优先级枚举"""
    URGENT = "Urgent"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# 看板列的固定顺序
BOARD_STATUSES = tuple(status.value for status in TaskStatus)

# 创建任务时未指定状态的默认值，不属于任何看板列
DEFAULT_TASK_STATUS = "PENDING"
DEFAULT_TASK_PRIORITY = TaskPriority.MEDIUM.value
