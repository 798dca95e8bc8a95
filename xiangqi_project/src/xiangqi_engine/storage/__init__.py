"""
存储模块

提供对局的序列化、恢复和文件读写。
"""

from .serializer import serialize_engine, apply_to_engine, save_to_file, load_from_file

__all__ = ['serialize_engine', 'apply_to_engine', 'save_to_file', 'load_from_file']
