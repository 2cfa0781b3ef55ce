__all__ = [
    'AcceptanceManager',
    'ChallengeManager',
    'CommentManager',
    'SolutionManager',
    'UserManager',
]

from .acceptance.manager import AcceptanceManager
from .challenge.manager import ChallengeManager
from .comment.manager import CommentManager
from .solution.manager import SolutionManager
from .user.manager import UserManager
