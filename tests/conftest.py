from hypothesis import settings

# `pytest --hypothesis-profile=thorough` for a longer run before a release.
settings.register_profile("thorough", settings(max_examples=2000, deadline=None))
