"""
Prompt definitions.
"""
from .prd import SYSTEM_INSTRUCTION, PRD_CONTRACT, build_user_prompt

__all__ = ["SYSTEM_INSTRUCTION", "PRD_CONTRACT", "build_user_prompt"]
