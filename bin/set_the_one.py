#!/usr/bin/env python

import argparse
import os
import sys

import dotenv

dotenv.load_dotenv()

# https://stackoverflow.com/questions/16981921
SCRIPT_PATH = os.path.realpath(os.path.join(os.getcwd(), os.path.expanduser(__file__)))
sys.path.append(os.path.dirname(os.path.dirname(SCRIPT_PATH)))
from desafia.clients import DynamoClient  # noqa E402
from desafia.models import ChallengeManager  # noqa E402


def parse_args():
    parser = argparse.ArgumentParser(description='Feature a challenge as "the one"')
    parser.add_argument('-c', dest='challenge_id', required=True, help='id of the challenge to feature')
    args = parser.parse_args()
    return args.challenge_id


def main():
    challenge_id = parse_args()
    challenge_manager = ChallengeManager({'dynamo': DynamoClient()})

    print(f'Featuring challenge `{challenge_id}`... ', end='')
    challenge = challenge_manager.set_the_one(challenge_id)
    print(f'done, `{challenge.item.get("name")}` is the one.')


if __name__ == '__main__':
    main()
