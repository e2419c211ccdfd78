from .balance_ledger import BalanceLedger as BalanceLedger
from .credential_directory import CredentialDirectory as CredentialDirectory
