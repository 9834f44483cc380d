#!/usr/bin/env python3
"""
数据库初始化脚本
用于创建数据库表和示例数据
"""

from datetime import datetime, timedelta

from taskboard.core import database
from taskboard.models import Project, Task, Team, TaskStatus, User


def create_tables():
    """创建数据库表"""
    print("正在创建数据库表...")
    database.create_tables()
    print("数据库表创建完成")


def create_initial_data():
    """创建示例数据"""
    db = database.get_session_factory()()

    try:
        print("正在创建示例数据...")

        # 检查是否已有示例用户
        demo_user = db.query(User).filter(User.username == "demo").first()
        if demo_user:
            print("示例用户已存在，跳过创建")
            return

        team = Team(team_name="示例团队")
        db.add(team)
        db.commit()
        db.refresh(team)

        demo_user = User(cognito_id="demo-cognito-id", username="demo", team_id=team.id)
        db.add(demo_user)
        db.commit()
        db.refresh(demo_user)

        now = datetime.now()
        project = Project(
            name="示例项目",
            description="这是一个示例项目，用于演示看板功能",
            start_date=now,
            end_date=now + timedelta(days=30),
        )
        db.add(project)
        db.commit()
        db.refresh(project)

        # 每个看板列一个示例任务
        tasks = [
            ("设计数据模型", TaskStatus.COMPLETED, "High"),
            ("实现任务接口", TaskStatus.UNDER_REVIEW, "High"),
            ("实现看板拖拽", TaskStatus.WORKING_PROGRESS, "Medium"),
            ("编写使用文档", TaskStatus.TO_DO, "Low"),
        ]
        for title, status, priority in tasks:
            db.add(Task(
                title=title,
                status=status.value,
                priority=priority,
                points=0,
                project_id=project.id,
                author_user_id=demo_user.user_id,
                assigned_user_id=demo_user.user_id,
            ))

        db.commit()

        print("示例数据创建完成")
        print(f"示例项目ID: {project.id}，作者ID: {demo_user.user_id}")

    except Exception as e:
        print(f"创建示例数据时出错: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main():
    """主函数"""
    print("开始初始化数据库...")
    database.init_db_connection()
    create_tables()
    create_initial_data()
    print("数据库初始化完成！")


if __name__ == "__main__":
    main()
