import logging
import uuid

import pendulum

from desafia import models
from desafia.models.challenge.exceptions import ChallengeDoesNotExist

from .dynamo import SolutionDynamo
from .exceptions import NotSolutionAuthor, SolutionDoesNotExist
from .model import Solution

logger = logging.getLogger()


class SolutionManager:
    def __init__(self, clients, managers=None):
        managers = managers or {}
        managers['solution'] = self
        self.challenge_manager = managers.get('challenge') or models.ChallengeManager(clients, managers=managers)
        self.user_manager = managers.get('user') or models.UserManager(clients, managers=managers)

        self.clients = clients
        if 'dynamo' in clients:
            self.dynamo = SolutionDynamo(clients['dynamo'])

    def get_solution(self, solution_id, challenge_id):
        solution_item = self.dynamo.get_solution(solution_id, challenge_id)
        return self.init_solution(solution_item) if solution_item else None

    def init_solution(self, solution_item):
        return Solution(solution_item, dynamo=getattr(self, 'dynamo', None))

    def add_solution(self, challenge_id, user_google_id, title, description, solution_id=None, now=None):
        now = now or pendulum.now('utc')
        if not self.challenge_manager.get_challenge(challenge_id):
            raise ChallengeDoesNotExist(challenge_id)

        solution_id = solution_id or str(uuid.uuid4())
        solution_item = self.dynamo.add_solution(
            solution_id, challenge_id, user_google_id, title, description, now=now
        )
        self.user_manager.increment_interactions(user_google_id)
        return self.init_solution(solution_item)

    def list_solutions(self, challenge_id, limit=None):
        """
        Solutions of the challenge, most liked first, cut down to `limit`.
        The cut keeps the *tail* of the sorted list, so it is the `limit` least liked solutions
        that are returned. Clients depend on this, don't change it without changing them.
        """
        solutions = [self.init_solution(item) for item in self.dynamo.generate_by_challenge(challenge_id)]
        solutions.sort(key=lambda solution: solution.like_count, reverse=True)
        if limit is None:
            return solutions
        return solutions[max(len(solutions) - limit, 0) :]

    def like_solution(self, user_google_id, solution_id, challenge_id):
        solution = self.get_solution(solution_id, challenge_id)
        if not solution:
            raise SolutionDoesNotExist(solution_id)
        solution.like(user_google_id)
        # separate write, a failure here leaves the like in place
        self.user_manager.increment_interactions(user_google_id)
        return solution

    def dislike_solution(self, user_google_id, solution_id, challenge_id):
        solution = self.get_solution(solution_id, challenge_id)
        if not solution:
            raise SolutionDoesNotExist(solution_id)
        solution.dislike(user_google_id)
        # takes back the interaction the like earned
        self.user_manager.decrement_interactions(user_google_id)
        return solution

    def delete_solution(self, solution_id, challenge_id, user_google_id):
        "Only the author may delete a solution, and it costs them the interaction it earned"
        solution = self.get_solution(solution_id, challenge_id)
        if not solution:
            raise SolutionDoesNotExist(solution_id)
        if solution.user_google_id != user_google_id:
            raise NotSolutionAuthor(user_google_id, solution_id)
        solution.delete()
        self.user_manager.decrement_interactions(solution.user_google_id)
        return solution
