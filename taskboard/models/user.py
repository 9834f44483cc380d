"""
用户与团队模型模块
在看板范围内仅作为外键目标
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from taskboard.core.database import Base


class User(Base):
    """用户表模型"""
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True, comment='用户ID')
    cognito_id = Column(String(255), unique=True, nullable=False, comment='外部身份ID')
    username = Column(String(100), unique=True, nullable=False, comment='用户名')
    profile_picture_url = Column(String(500), comment='头像地址')
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="SET NULL"), comment='所属团队ID')

    # 关系
    team = relationship("Team", foreign_keys=[team_id], back_populates="members")
    authored_tasks = relationship(
        "Task", foreign_keys="Task.author_user_id", back_populates="author", passive_deletes=True
    )
    assigned_tasks = relationship(
        "Task", foreign_keys="Task.assigned_user_id", back_populates="assignee", passive_deletes=True
    )


class Team(Base):
    """团队表模型"""
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='团队ID')
    team_name = Column(String(100), nullable=False, comment='团队名称')
    # users 与 teams 互相引用，use_alter 打破建表顺序上的循环依赖
    product_owner_user_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="SET NULL", use_alter=True, name="fk_teams_product_owner"),
        comment='产品负责人ID'
    )
    project_manager_user_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="SET NULL", use_alter=True, name="fk_teams_project_manager"),
        comment='项目经理ID'
    )

    # 关系
    members = relationship("User", foreign_keys=[User.team_id], back_populates="team", passive_deletes=True)
    project_links = relationship("ProjectTeam", back_populates="team", passive_deletes=True)
