ASSETS_ROOT = 'https://vitorflg-assets.s3-sa-east-1.amazonaws.com'

# category -> illustration shown on the challenge card
CATEGORY_IMAGES = {
    'Internet das Coisas': f'{ASSETS_ROOT}/IoT.svg',
    'Desenvolvimento Web': f'{ASSETS_ROOT}/webdev-prog.svg',
    'Lógica de Programação': f'{ASSETS_ROOT}/webdev-prog.svg',
    'Machine Learning': f'{ASSETS_ROOT}/machine-learning.svg',
    'Ciência de Dados': f'{ASSETS_ROOT}/datascience.svg',
    'Redes': f'{ASSETS_ROOT}/rj45.svg',
}


def get_challenge_image(categories):
    "Image of the first category that has one, or None"
    for category in categories or []:
        if category in CATEGORY_IMAGES:
            return CATEGORY_IMAGES[category]
    return None
