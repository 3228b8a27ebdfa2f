import sys
import traceback
from pathlib import Path

import boa
from boa.contracts.vyper.vyper_contract import VyperDeployer
from moccasin.boa_tools import VyperContract

CONTRACT_NAME = "lock"
SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def get_contract_factory(name: str) -> VyperDeployer:
    """Compile ``src/<name>.vy`` into a deployer without deploying it."""
    # by path rather than `from src import ...`: the name is only known at runtime
    return boa.load_partial(str(SRC_DIR / f"{name}.vy"))


def deploy_lock(name: str = CONTRACT_NAME) -> VyperContract:
    lock_factory = get_contract_factory(name)
    # boa returns once the deployment receipt is in
    lock_contract = lock_factory.deploy()
    print(f"CONTRACT DEPLOYED TO {lock_contract.address}")
    return lock_contract


def moccasin_main() -> VyperContract:
    try:
        return deploy_lock()
    except Exception:
        traceback.print_exc()
        sys.exit(1)
