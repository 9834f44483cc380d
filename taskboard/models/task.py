"""
任务模型模块
包含任务及其附属数据（指派、附件、评论）
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from taskboard.core.database import Base


class Task(Base):
    """任务表模型"""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='任务ID')
    title = Column(String(200), nullable=False, comment='任务标题')
    description = Column(Text, comment='任务描述')
    status = Column(String(50), index=True, comment='任务状态，统一为大写')
    priority = Column(String(20), comment='任务优先级')
    tags = Column(String(500), comment='任务标签，逗号分隔')
    start_date = Column(DateTime, comment='开始时间')
    due_date = Column(DateTime, comment='截止时间')
    points = Column(Integer, comment='故事点')
    project_id = Column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True, comment='所属项目ID'
    )
    author_user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, comment='创建人ID'
    )
    assigned_user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="SET NULL"), comment='负责人ID'
    )

    # 关系
    project = relationship("Project", back_populates="tasks")
    author = relationship("User", foreign_keys=[author_user_id], back_populates="authored_tasks")
    assignee = relationship("User", foreign_keys=[assigned_user_id], back_populates="assigned_tasks")
    assignments = relationship("TaskAssignment", back_populates="task", passive_deletes=True)
    attachments = relationship("Attachment", back_populates="task", passive_deletes=True)
    comments = relationship("Comment", back_populates="task", passive_deletes=True)


class TaskAssignment(Base):
    """任务指派表模型"""
    __tablename__ = "task_assignments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)

    task = relationship("Task", back_populates="assignments")


class Attachment(Base):
    """任务附件表模型"""
    __tablename__ = "attachments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    file_url = Column(String(500), nullable=False, comment='附件地址')
    file_name = Column(String(255), comment='附件文件名')
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    uploaded_by_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)

    task = relationship("Task", back_populates="attachments")


class Comment(Base):
    """任务评论表模型"""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False, comment='评论内容')
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)

    task = relationship("Task", back_populates="comments")
