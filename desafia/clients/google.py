import os

import requests

GOOGLE_TOKEN_INFO_URL = os.environ.get('GOOGLE_TOKEN_INFO_URL', 'https://www.googleapis.com/oauth2/v3/tokeninfo')


class GoogleClient:
    def __init__(self, token_info_url=GOOGLE_TOKEN_INFO_URL):
        self.token_info_url = token_info_url

    def get_token_info(self, access_token):
        "Introspect the access token and return its claims, or raise a ValueError"
        # https://developers.google.com/identity/sign-in/web/backend-auth#calling-the-tokeninfo-endpoint
        if not access_token:
            raise ValueError('No access token provided')
        try:
            resp = requests.get(url=self.token_info_url, params={'access_token': access_token}, timeout=10)
        except requests.RequestException as err:
            raise ValueError(f'Google server could not be reached: `{err}`') from err
        if resp.status_code != 200:
            raise ValueError(f'Google server response status code is non-200: `{resp.status_code}`')
        info = resp.json()
        if not info.get('sub'):
            raise ValueError('Google server response body does not contain a subject')
        return info
