import logging

from desafia import clients, models
from desafia.models.challenge.exceptions import ChallengeDoesNotExist, ChallengeException
from desafia.models.comment.exceptions import CommentDoesNotExist, CommentException
from desafia.models.solution.exceptions import SolutionDoesNotExist, SolutionException
from desafia.models.user.exceptions import UserException, UserNotAuthenticated

from . import routes
from .exceptions import NotFound, Unauthenticated, Validation
from .validation import validate_interaction_kind, validate_limit, validate_page, validate_required

logger = logging.getLogger()

clients = {
    'dynamo': clients.DynamoClient(),
    'google': clients.GoogleClient(),
}

# shared hash table of all managers, enables inter-manager communication
managers = {}
acceptance_manager = managers.get('acceptance') or models.AcceptanceManager(clients, managers=managers)
challenge_manager = managers.get('challenge') or models.ChallengeManager(clients, managers=managers)
comment_manager = managers.get('comment') or models.CommentManager(clients, managers=managers)
solution_manager = managers.get('solution') or models.SolutionManager(clients, managers=managers)
user_manager = managers.get('user') or models.UserManager(clients, managers=managers)


def authenticated(func):
    "Decorator that swaps the access token for the verified google claims of the caller"

    def wrapper(access_token, arguments, **kwargs):
        try:
            caller = user_manager.authenticate(access_token)
        except UserNotAuthenticated as err:
            raise Unauthenticated(str(err)) from err
        return func(caller, arguments, **kwargs)

    return wrapper


def translate_model_errors(func):
    "Decorator that reports model layer errors to the client with the right error type"

    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ChallengeDoesNotExist, SolutionDoesNotExist, CommentDoesNotExist) as err:
            raise NotFound(str(err)) from err
        except UserNotAuthenticated as err:
            raise Unauthenticated(str(err)) from err
        except (ChallengeException, SolutionException, CommentException, UserException) as err:
            raise Validation(str(err)) from err

    return wrapper


@routes.register('Query.hello')
def hello(access_token, arguments, **kwargs):
    return 'Hello world!'


@routes.register('Query.theOne')
def the_one(access_token, arguments, **kwargs):
    challenge = challenge_manager.get_the_one()
    return challenge.serialize() if challenge else None


@routes.register('Query.ranking')
def ranking(access_token, arguments, **kwargs):
    return user_manager.get_ranking()


@routes.register('Query.currentUser')
@translate_model_errors
def current_user(access_token, arguments, **kwargs):
    return user_manager.get_current_user(access_token)


@routes.register('Query.challenges')
def challenges(access_token, arguments, **kwargs):
    page = arguments.get('page') or 0
    validate_page(page)
    resp = challenge_manager.list_challenges(
        search=arguments.get('search'),
        tags=arguments.get('tags'),
        categories=arguments.get('categories'),
        page=page,
    )
    return {
        'count': resp['count'],
        'challenges': [challenge.serialize() for challenge in resp['challenges']],
    }


@routes.register('Query.challenge')
def challenge(access_token, arguments, **kwargs):
    validate_required(arguments, 'id')
    challenge_id = arguments['id']
    current_user_id = arguments.get('currentUserId')

    challenge = challenge_manager.get_challenge(challenge_id)
    if not challenge:
        raise NotFound(f'Challenge `{challenge_id}` does not exist')
    return challenge.serialize(accepted=acceptance_manager.is_accepted(current_user_id, challenge.id))


@routes.register('Query.solutions')
def solutions(access_token, arguments, **kwargs):
    validate_required(arguments, 'challengeId')
    limit = arguments.get('limit')
    validate_limit(limit)
    current_user_id = arguments.get('currentUserId')

    solutions = solution_manager.list_solutions(arguments['challengeId'], limit=limit)
    return [solution.serialize(current_user_id) for solution in solutions]


@routes.register('Query.solutionComments')
def solution_comments(access_token, arguments, **kwargs):
    validate_required(arguments, 'solutionId')
    limit = arguments.get('limit')
    validate_limit(limit)

    comments = comment_manager.list_comments(arguments['solutionId'], limit=limit)
    return [comment.serialize() for comment in comments]


@routes.register('Mutation.user')
@translate_model_errors
def user(access_token, arguments, **kwargs):
    input_args = arguments.get('input') or {}
    validate_required(input_args, 'googleId', 'email')
    return user_manager.register_user(
        access_token, input_args['googleId'], input_args['email'], name=input_args.get('name')
    )


@routes.register('Mutation.challenge')
@translate_model_errors
def create_challenge(access_token, arguments, **kwargs):
    input_args = arguments.get('input') or {}
    validate_required(input_args, 'userGoogleId')
    challenge = challenge_manager.add_challenge(
        input_args['userGoogleId'],
        challenge_id=input_args.get('id'),
        name=input_args.get('name'),
        description=input_args.get('description'),
        tags=input_args.get('tags'),
        categories=input_args.get('categories'),
        details=input_args.get('details'),
    )
    return challenge.serialize()


@routes.register('Mutation.solution')
@translate_model_errors
def create_solution(access_token, arguments, **kwargs):
    input_args = arguments.get('input') or {}
    validate_required(input_args, 'challengeId', 'title', 'description', 'userGoogleId')
    solution = solution_manager.add_solution(
        input_args['challengeId'],
        input_args['userGoogleId'],
        input_args['title'],
        input_args['description'],
        solution_id=input_args.get('id'),
    )
    return solution.serialize(input_args['userGoogleId'])


@routes.register('Mutation.likeSolution')
@authenticated
@translate_model_errors
def like_solution(caller, arguments, **kwargs):
    validate_required(arguments, 'solutionId', 'challengeId')
    solution = solution_manager.like_solution(caller['sub'], arguments['solutionId'], arguments['challengeId'])
    return solution.serialize(caller['sub'])


@routes.register('Mutation.dislikeSolution')
@authenticated
@translate_model_errors
def dislike_solution(caller, arguments, **kwargs):
    validate_required(arguments, 'solutionId', 'challengeId')
    solution = solution_manager.dislike_solution(caller['sub'], arguments['solutionId'], arguments['challengeId'])
    return solution.serialize(caller['sub'])


@routes.register('Mutation.acceptChallenge')
@authenticated
@translate_model_errors
def accept_challenge(caller, arguments, **kwargs):
    validate_required(arguments, 'challengeId')
    challenge = acceptance_manager.accept_challenge(caller['sub'], arguments['challengeId'])
    return challenge.serialize(accepted=True)


@routes.register('Mutation.unacceptChallenge')
@authenticated
@translate_model_errors
def unaccept_challenge(caller, arguments, **kwargs):
    validate_required(arguments, 'challengeId')
    challenge = acceptance_manager.unaccept_challenge(caller['sub'], arguments['challengeId'])
    return challenge.serialize(accepted=False)


@routes.register('Mutation.commentSolution')
@authenticated
@translate_model_errors
def comment_solution(caller, arguments, **kwargs):
    input_args = arguments.get('input') or {}
    validate_required(input_args, 'solutionId', 'challengeId', 'message')
    comment = comment_manager.add_comment(
        input_args['solutionId'], input_args['challengeId'], caller['sub'], caller.get('email'), input_args['message']
    )
    return comment.serialize()


@routes.register('Mutation.deleteInteraction')
@authenticated
@translate_model_errors
def delete_interaction(caller, arguments, **kwargs):
    validate_required(arguments, 'kind', 'id', 'parentId')
    kind = arguments['kind']
    validate_interaction_kind(kind)

    if kind == 'SOLUTION':
        solution_manager.delete_solution(arguments['id'], arguments['parentId'], caller['sub'])
    else:
        comment_manager.delete_comment(arguments['id'], arguments['parentId'], caller['sub'])
    return True
