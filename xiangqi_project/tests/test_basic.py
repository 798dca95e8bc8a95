"""
基础测试模块

测试项目的基本功能和导入。
"""

import pytest
import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


def test_project_import():
    """测试项目主模块是否可以正常导入"""
    try:
        import xiangqi_project
        assert xiangqi_project.__version__ == "0.1.0"
        assert xiangqi_project.__author__ == "Xiangqi Project Team"
    except ImportError as e:
        pytest.fail(f"无法导入xiangqi_project模块: {e}")


def test_submodules_import():
    """测试子模块是否可以正常导入"""
    try:
        from xiangqi_project.src import xiangqi_engine
        from xiangqi_project.src.xiangqi_engine import config, game, rules_engine, storage, utils

        assert xiangqi_engine.__version__ == "0.1.0"
        assert rules_engine.RuleEngine is xiangqi_engine.RuleEngine
        assert game.GameEngine is xiangqi_engine.GameEngine

    except ImportError as e:
        pytest.fail(f"无法导入子模块: {e}")


def test_main_entry_points():
    """测试主入口文件是否存在"""
    main_file = project_root / "xiangqi_project" / "main.py"
    assert main_file.exists(), "主入口文件 xiangqi_project/main.py 不存在"


def test_directory_structure():
    """测试项目目录结构是否正确"""
    expected_dirs = [
        "xiangqi_project",
        "xiangqi_project/src",
        "xiangqi_project/src/xiangqi_engine",
        "xiangqi_project/src/xiangqi_engine/rules_engine",
        "xiangqi_project/src/xiangqi_engine/game",
        "xiangqi_project/src/xiangqi_engine/storage",
        "xiangqi_project/tests",
    ]

    for dir_path in expected_dirs:
        full_path = project_root / dir_path
        assert full_path.exists(), f"目录 {dir_path} 不存在"
        assert full_path.is_dir(), f"{dir_path} 不是目录"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
