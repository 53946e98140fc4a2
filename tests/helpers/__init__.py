from .fake_chain import (  # noqa: F401
    FakeCall,
    FakeChainClient,
    FakeClock,
    dispatch_error,
)
