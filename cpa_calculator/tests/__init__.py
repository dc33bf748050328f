'''
Target CPA Calculator Test Suite

Test Modules:
-------------
- test_derivation.py: target CPA / max cost per lead / profit retained formulas
- test_formatting.py: currency display, decimal text, screen view
- test_state_store.py: client state container and local storage mirroring
- test_storage.py: DatabaseStorage against a mocked asyncpg pool
- test_calculations_api.py: GET/POST /api/calculations contract
- test_api_client.py: httpx client against a mock transport
- test_save_action.py: save-to-history in-flight guard and notifications

Running Tests:
--------------
    pip install -e ".[test]"
    pytest
'''

__all__ = []
