def make_fetch_token(token):

    async def fetch_token():
        return token

    return fetch_token


fetch_token = make_fetch_token("TOKEN")
