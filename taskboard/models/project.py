"""
项目模型模块
包含项目及项目与团队的关联
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from taskboard.core.database import Base


class Project(Base):
    """项目表模型"""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='项目ID')
    name = Column(String(200), nullable=False, comment='项目名称')
    description = Column(Text, comment='项目描述')
    start_date = Column(DateTime, comment='开始时间')
    end_date = Column(DateTime, comment='结束时间')

    # 关系：删除由数据库外键级联完成
    tasks = relationship("Task", back_populates="project", passive_deletes=True)
    team_links = relationship("ProjectTeam", back_populates="project", passive_deletes=True)


class ProjectTeam(Base):
    """项目团队关联表模型"""
    __tablename__ = "project_teams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)

    team = relationship("Team", back_populates="project_links")
    project = relationship("Project", back_populates="team_links")
