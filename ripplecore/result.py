"""Transaction engine result codes and their names."""

from __future__ import annotations

from typing import BinaryIO


class TransactionResult(int):
    """A transaction engine result code.

    Codes the engine may report but which have no known name have an empty
    token and description.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        token = self.token()
        return f"TransactionResult({token or int(self)})"

    def __str__(self) -> str:
        return self.token()

    def token(self) -> str:
        """The short symbolic name, such as ``tesSUCCESS``."""
        entry = _NAMES.get(int(self))
        return entry[0] if entry else ""

    def human(self) -> str:
        """A human-readable description of the result."""
        entry = _NAMES.get(int(self))
        return entry[1] if entry else ""

    def success(self) -> bool:
        return int(self) == 0

    def queued(self) -> bool:
        return int(self) == int(terQUEUED)

    def symbol(self) -> str:
        """A one-character summary of the outcome."""
        code = int(self)
        if code in _SYMBOL_OK:
            return "✓"
        if code in _SYMBOL_PARTIAL:
            return "½"
        if code in _SYMBOL_UNFUNDED:
            return "$"
        return "✗"

    @classmethod
    def from_token(cls, token: str) -> TransactionResult:
        """Look a result up by its symbolic name."""
        try:
            return cls(_REVERSE[token])
        except KeyError:
            raise ValueError(f"unknown transaction result: {token}") from None

    def to_bytes(self) -> bytes:  # type: ignore[override]
        """The single-byte wire encoding; only codes 0..255 can be encoded."""
        code = int(self)
        if code > 0xFF or code < 0:
            raise ValueError(f"Cannot marshal transaction result: {code}")
        return bytes([code])

    @classmethod
    def read(cls, stream: BinaryIO) -> TransactionResult:
        """Read a single-byte encoded result from a binary stream."""
        data = stream.read(1)
        if not data:
            raise EOFError("unexpected end of data reading transaction result")
        return cls(data[0])


R = TransactionResult

tesSUCCESS = R(0)

tecCLAIM = R(100)
tecPATH_PARTIAL = R(101)
tecUNFUNDED_ADD = R(102)
tecUNFUNDED_OFFER = R(103)
tecUNFUNDED_PAYMENT = R(104)
tecFAILED_PROCESSING = R(105)
tecDIR_FULL = R(121)
tecINSUF_RESERVE_LINE = R(122)
tecINSUF_RESERVE_OFFER = R(123)
tecNO_DST = R(124)
tecNO_DST_INSUF_XRP = R(125)
tecNO_LINE_INSUF_RESERVE = R(126)
tecNO_LINE_REDUNDANT = R(127)
tecPATH_DRY = R(128)
tecUNFUNDED = R(129)
tecNO_ALTERNATIVE_KEY = R(130)
tecNO_REGULAR_KEY = R(131)
tecOWNERS = R(132)
tecNO_ISSUER = R(133)
tecNO_AUTH = R(134)
tecNO_LINE = R(135)
tecINSUFF_FEE = R(136)
tecFROZEN = R(137)
tecNO_TARGET = R(138)
tecNO_PERMISSION = R(139)
tecNO_ENTRY = R(140)
tecINSUFFICIENT_RESERVE = R(141)
tecNEED_MASTER_KEY = R(142)
tecDST_TAG_NEEDED = R(143)
tecINTERNAL = R(144)
tecOVERSIZE = R(145)
tecCRYPTOCONDITION_ERROR = R(146)
tecINVARIANT_FAILED = R(147)
tecEXPIRED = R(148)
tecDUPLICATE = R(149)
tecKILLED = R(150)
tecHAS_OBLIGATIONS = R(151)
tecTOO_SOON = R(152)

telLOCAL_ERROR = R(-399)
telBAD_DOMAIN = R(-398)
telBAD_PATH_COUNT = R(-397)
telBAD_PUBLIC_KEY = R(-396)
telFAILED_PROCESSING = R(-395)
telINSUF_FEE_P = R(-394)
telNO_DST_PARTIAL = R(-393)
telCAN_NOT_QUEUE = R(-392)
telCAN_NOT_QUEUE_BALANCE = R(-391)
telCAN_NOT_QUEUE_BLOCKS = R(-390)
telCAN_NOT_QUEUE_BLOCKED = R(-389)
telCAN_NOT_QUEUE_FEE = R(-388)
telCAN_NOT_QUEUE_FULL = R(-387)

temMALFORMED = R(-299)
temBAD_AMOUNT = R(-298)
temBAD_CURRENCY = R(-297)
temBAD_EXPIRATION = R(-296)
temBAD_FEE = R(-295)
temBAD_ISSUER = R(-294)
temBAD_LIMIT = R(-293)
temBAD_OFFER = R(-292)
temBAD_PATH = R(-291)
temBAD_PATH_LOOP = R(-290)
temBAD_SEND_XRP_LIMIT = R(-289)
temBAD_SEND_XRP_MAX = R(-288)
temBAD_SEND_XRP_NO_DIRECT = R(-287)
temBAD_SEND_XRP_PARTIAL = R(-286)
temBAD_SEND_XRP_PATHS = R(-285)
temBAD_SEQUENCE = R(-284)
temBAD_SIGNATURE = R(-283)
temBAD_SRC_ACCOUNT = R(-282)
temBAD_TRANSFER_RATE = R(-281)
temDST_IS_SRC = R(-280)
temDST_NEEDED = R(-279)
temINVALID = R(-278)
temINVALID_FLAG = R(-277)
temREDUNDANT = R(-276)
temRIPPLE_EMPTY = R(-275)
temDISABLED = R(-274)
temBAD_SIGNER = R(-273)
temBAD_QUORUM = R(-272)
temBAD_WEIGHT = R(-271)
temBAD_TICK_SIZE = R(-270)
temINVALID_ACCOUNT_ID = R(-269)
temCANNOT_PREAUTH_SELF = R(-268)
temUNCERTAIN = R(-267)
temUNKNOWN = R(-266)

tefFAILURE = R(-199)
tefALREADY = R(-198)
tefBAD_ADD_AUTH = R(-197)
tefBAD_AUTH = R(-196)
tefBAD_CLAIM_ID = R(-195)
tefBAD_GEN_AUTH = R(-194)
tefBAD_LEDGER = R(-193)
tefCLAIMED = R(-192)
tefCREATED = R(-191)
tefDST_TAG_NEEDED = R(-190)
tefEXCEPTION = R(-189)
tefGEN_IN_USE = R(-188)
tefINTERNAL = R(-187)
tefNO_AUTH_REQUIRED = R(-186)  # Can't set auth if auth is not required.
tefPAST_SEQ = R(-185)
tefWRONG_PRIOR = R(-184)
tefMASTER_DISABLED = R(-183)
tefMAX_LEDGER = R(-182)
tefBAD_SIGNATURE = R(-181)
tefBAD_QUORUM = R(-180)
tefNOT_MULTI_SIGNING = R(-179)
tefBAD_AUTH_MASTER = R(-178)
tefINVARIANT_FAILED = R(-177)
tefTOO_BIG = R(-176)

terRETRY = R(-99)
terFUNDS_SPENT = R(-98)
terINSUF_FEE_B = R(-97)
terNO_ACCOUNT = R(-96)
terNO_AUTH = R(-95)
terNO_LINE = R(-94)
terOWNERS = R(-93)
terPRE_SEQ = R(-92)
terLAST = R(-91)
terNO_RIPPLE = R(-90)
terQUEUED = R(-89)

del R

_NAMES: dict[int, tuple[str, str]] = {
    tesSUCCESS: ("tesSUCCESS", "The transaction was applied."),
    tecCLAIM: ("tecCLAIM", "Fee claimed. Sequence used. No action."),
    tecDIR_FULL: ("tecDIR_FULL", "Can not add entry to full directory."),
    tecFAILED_PROCESSING: ("tecFAILED_PROCESSING", "Failed to correctly process transaction."),
    tecINSUF_RESERVE_LINE: ("tecINSUF_RESERVE_LINE", "Insufficient reserve to add trust line."),
    tecINSUF_RESERVE_OFFER: ("tecINSUF_RESERVE_OFFER", "Insufficient reserve to create offer."),
    tecNO_DST: ("tecNO_DST", "Destination does not exist. Send XRP to create it."),
    tecNO_DST_INSUF_XRP: (
        "tecNO_DST_INSUF_XRP",
        "Destination does not exist. Too little XRP sent to create it.",
    ),
    tecNO_LINE_INSUF_RESERVE: (
        "tecNO_LINE_INSUF_RESERVE",
        "No such line. Too little reserve to create it.",
    ),
    tecNO_LINE_REDUNDANT: ("tecNO_LINE_REDUNDANT", "Can't set non-existant line to default."),
    tecPATH_DRY: ("tecPATH_DRY", "Path could not send partial amount."),
    tecPATH_PARTIAL: ("tecPATH_PARTIAL", "Path could not send full amount."),
    tecNO_ALTERNATIVE_KEY: (
        "tecNO_ALTERNATIVE_KEY",
        "The operation would remove the ability to sign transactions with the account.",
    ),
    tecNO_REGULAR_KEY: ("tecNO_REGULAR_KEY", "Regular key is not set."),
    tecUNFUNDED: ("tecUNFUNDED", "One of _ADD, _OFFER, or _SEND. Deprecated."),
    tecUNFUNDED_ADD: ("tecUNFUNDED_ADD", "Insufficient XRP balance for WalletAdd."),
    tecUNFUNDED_OFFER: ("tecUNFUNDED_OFFER", "Insufficient balance to fund created offer."),
    tecUNFUNDED_PAYMENT: ("tecUNFUNDED_PAYMENT", "Insufficient XRP balance to send."),
    tecOWNERS: ("tecOWNERS", "Non-zero owner count."),
    tecNO_ISSUER: ("tecNO_ISSUER", "Issuer account does not exist."),
    tecNO_AUTH: ("tecNO_AUTH", "Not authorized to hold asset."),
    tecNO_LINE: ("tecNO_LINE", "No such line."),
    tecINSUFF_FEE: ("tecINSUFF_FEE", "Insufficient balance to pay fee."),
    tecFROZEN: ("tecFROZEN", "Asset is frozen."),
    tecNO_TARGET: ("tecNO_TARGET", "Target account does not exist."),
    tecNO_PERMISSION: ("tecNO_PERMISSION", "No permission to perform requested operation."),
    tecNO_ENTRY: ("tecNO_ENTRY", "No matching entry found."),
    tecINSUFFICIENT_RESERVE: (
        "tecINSUFFICIENT_RESERVE",
        "Insufficient reserve to complete requested operation.",
    ),
    tecNEED_MASTER_KEY: ("tecNEED_MASTER_KEY", "The operation requires the use of the Master Key."),
    tecDST_TAG_NEEDED: ("tecDST_TAG_NEEDED", "A destination tag is required."),
    tecINTERNAL: ("tecINTERNAL", "An internal error has occurred during processing."),
    tecCRYPTOCONDITION_ERROR: (
        "tecCRYPTOCONDITION_ERROR",
        "Malformed, invalid, or mismatched conditional or fulfillment.",
    ),
    tecINVARIANT_FAILED: (
        "tecINVARIANT_FAILED",
        "One or more invariants for the transaction were not satisfied.",
    ),
    tecOVERSIZE: ("tecOVERSIZE", "Object exceeded serialization limits"),
    tecEXPIRED: ("tecEXPIRED", "Expiration time is passed."),
    tecDUPLICATE: ("tecDUPLICATE", "Ledger object already exists."),
    tecKILLED: ("tecKILLED", "FillOrKill offer killed."),
    tecHAS_OBLIGATIONS: (
        "tecHAS_OBLIGATIONS",
        "The account cannot be deleted since it has obligations.",
    ),
    tecTOO_SOON: (
        "tecTOO_SOON",
        "It is too early to attempt the requested operation. Please wait.",
    ),
    tefFAILURE: ("tefFAILURE", "Failed to apply."),
    tefALREADY: ("tefALREADY", "The exact transaction was already in this ledger."),
    tefBAD_ADD_AUTH: ("tefBAD_ADD_AUTH", "Not authorized to add account."),
    tefBAD_AUTH: ("tefBAD_AUTH", "Transaction's public key is not authorized."),
    tefBAD_CLAIM_ID: ("tefBAD_CLAIM_ID", "Malformed: Bad claim id."),
    tefBAD_GEN_AUTH: ("tefBAD_GEN_AUTH", "Not authorized to claim generator."),
    tefBAD_LEDGER: ("tefBAD_LEDGER", "Ledger in unexpected state."),
    tefCLAIMED: ("tefCLAIMED", "Can not claim a previously claimed account."),
    tefCREATED: ("tefCREATED", "Can't add an already created account."),
    tefDST_TAG_NEEDED: ("tefDST_TAG_NEEDED", "Destination tag required."),
    tefEXCEPTION: ("tefEXCEPTION", "Unexpected program state."),
    tefGEN_IN_USE: ("tefGEN_IN_USE", "Generator already in use."),
    tefINTERNAL: ("tefINTERNAL", "Internal error."),
    tefNO_AUTH_REQUIRED: ("tefNO_AUTH_REQUIRED", "Auth is not required."),
    tefPAST_SEQ: ("tefPAST_SEQ", "This sequence number has already past."),
    tefWRONG_PRIOR: ("tefWRONG_PRIOR", "This previous transaction does not match."),
    tefMASTER_DISABLED: ("tefMASTER_DISABLED", "Master key is disabled."),
    tefMAX_LEDGER: ("tefMAX_LEDGER", "Ledger sequence too high."),
    tefBAD_AUTH_MASTER: (
        "tefBAD_AUTH_MASTER",
        "Auth for unclaimed account needs correct master key.",
    ),
    tefINVARIANT_FAILED: (
        "tefINVARIANT_FAILED",
        "Fee claim violated invariants for the transaction.",
    ),
    tefTOO_BIG: ("tefTOO_BIG", "Transaction affects too many items."),
    telLOCAL_ERROR: ("telLOCAL_ERROR", "Local failure."),
    telBAD_DOMAIN: ("telBAD_DOMAIN", "Domain too long."),
    telBAD_PATH_COUNT: ("telBAD_PATH_COUNT", "Malformed: Too many paths."),
    telBAD_PUBLIC_KEY: ("telBAD_PUBLIC_KEY", "Public key too long."),
    telFAILED_PROCESSING: ("telFAILED_PROCESSING", "Failed to correctly process transaction."),
    telINSUF_FEE_P: ("telINSUF_FEE_P", "Fee insufficient."),
    telNO_DST_PARTIAL: ("telNO_DST_PARTIAL", "Partial payment to create account not allowed."),
    telCAN_NOT_QUEUE: ("telCAN_NOT_QUEUE", "Can not queue at this time."),
    telCAN_NOT_QUEUE_BALANCE: (
        "telCAN_NOT_QUEUE_BALANCE",
        "Can not queue at this time: insufficient balance to pay all queued fees.",
    ),
    telCAN_NOT_QUEUE_BLOCKS: (
        "telCAN_NOT_QUEUE_BLOCKS",
        "Can not queue at this time: would block later queued transaction(s).",
    ),
    telCAN_NOT_QUEUE_BLOCKED: (
        "telCAN_NOT_QUEUE_BLOCKED",
        "Can not queue at this time: blocking transaction in queue.",
    ),
    telCAN_NOT_QUEUE_FEE: (
        "telCAN_NOT_QUEUE_FEE",
        "Can not queue at this time: fee insufficient to replace queued transaction.",
    ),
    telCAN_NOT_QUEUE_FULL: (
        "telCAN_NOT_QUEUE_FULL",
        "Can not queue at this time: queue is full.",
    ),
    temMALFORMED: ("temMALFORMED", "Malformed transaction."),
    temBAD_AMOUNT: ("temBAD_AMOUNT", "Can only send positive amounts."),
    temBAD_CURRENCY: ("temBAD_CURRENCY", "Malformed: Bad currency."),
    temBAD_FEE: ("temBAD_FEE", "Invalid fee, negative or not XRP."),
    temBAD_EXPIRATION: ("temBAD_EXPIRATION", "Malformed: Bad expiration."),
    temBAD_ISSUER: ("temBAD_ISSUER", "Malformed: Bad issuer."),
    temBAD_LIMIT: ("temBAD_LIMIT", "Limits must be non-negative."),
    temBAD_OFFER: ("temBAD_OFFER", "Malformed: Bad offer."),
    temBAD_PATH: ("temBAD_PATH", "Malformed: Bad path."),
    temBAD_PATH_LOOP: ("temBAD_PATH_LOOP", "Malformed: Loop in path."),
    temBAD_SIGNATURE: ("temBAD_SIGNATURE", "Malformed: Bad signature."),
    temBAD_SRC_ACCOUNT: ("temBAD_SRC_ACCOUNT", "Malformed: Bad source account."),
    temBAD_TRANSFER_RATE: ("temBAD_TRANSFER_RATE", "Malformed: Transfer rate must be >= 1.0"),
    temBAD_SEQUENCE: ("temBAD_SEQUENCE", "Malformed: Sequence is not in the past."),
    temBAD_SEND_XRP_LIMIT: (
        "temBAD_SEND_XRP_LIMIT",
        "Malformed: Limit quality is not allowed for XRP to XRP.",
    ),
    temBAD_SEND_XRP_MAX: (
        "temBAD_SEND_XRP_MAX",
        "Malformed: Send max is not allowed for XRP to XRP.",
    ),
    temBAD_SEND_XRP_NO_DIRECT: (
        "temBAD_SEND_XRP_NO_DIRECT",
        "Malformed: No Ripple direct is not allowed for XRP to XRP.",
    ),
    temBAD_SEND_XRP_PARTIAL: (
        "temBAD_SEND_XRP_PARTIAL",
        "Malformed: Partial payment is not allowed for XRP to XRP.",
    ),
    temBAD_SEND_XRP_PATHS: (
        "temBAD_SEND_XRP_PATHS",
        "Malformed: Paths are not allowed for XRP to XRP.",
    ),
    temDST_IS_SRC: ("temDST_IS_SRC", "Destination may not be source."),
    temDST_NEEDED: ("temDST_NEEDED", "Destination not specified."),
    temINVALID: ("temINVALID", "The transaction is ill-formed."),
    temINVALID_FLAG: ("temINVALID_FLAG", "The transaction has an invalid flag."),
    temREDUNDANT: ("temREDUNDANT", "Sends same currency to self."),
    temRIPPLE_EMPTY: ("temRIPPLE_EMPTY", "PathSet with no paths."),
    temUNCERTAIN: ("temUNCERTAIN", "In process of determining result. Never returned."),
    temUNKNOWN: ("temUNKNOWN", "The transactions requires logic not implemented yet."),
    temDISABLED: ("temDISABLED", "The transaction requires logic that is currently disabled."),
    temBAD_TICK_SIZE: ("temBAD_TICK_SIZE", "Malformed: Tick size out of range."),
    temINVALID_ACCOUNT_ID: (
        "temINVALID_ACCOUNT_ID",
        "Malformed: A field contains an invalid account ID.",
    ),
    temCANNOT_PREAUTH_SELF: (
        "temCANNOT_PREAUTH_SELF",
        "Malformed: An account may not preauthorize itself.",
    ),
    terRETRY: ("terRETRY", "Retry transaction."),
    terFUNDS_SPENT: ("terFUNDS_SPENT", "Can't set password, password set funds already spent."),
    terINSUF_FEE_B: ("terINSUF_FEE_B", "Account balance can't pay fee."),
    terLAST: ("terLAST", "Process last."),
    terNO_RIPPLE: ("terNO_RIPPLE", "Path does not permit rippling."),
    terNO_ACCOUNT: ("terNO_ACCOUNT", "The source account does not exist."),
    terNO_AUTH: ("terNO_AUTH", "Not authorized to hold IOUs."),
    terNO_LINE: ("terNO_LINE", "No such line."),
    terPRE_SEQ: ("terPRE_SEQ", "Missing/inapplicable prior transaction."),
    terOWNERS: ("terOWNERS", "Non-zero owner count."),
    terQUEUED: ("terQUEUED", "Held until escalated fee drops."),
}
_NAMES = {int(code): entry for code, entry in _NAMES.items()}

_REVERSE: dict[str, int] = {token: code for code, (token, _) in _NAMES.items()}

_SYMBOL_OK = frozenset({int(tesSUCCESS), int(tecCLAIM)})
_SYMBOL_PARTIAL = frozenset({int(tecPATH_PARTIAL), int(tecPATH_DRY)})
_SYMBOL_UNFUNDED = frozenset(
    {int(tecUNFUNDED), int(tecUNFUNDED_ADD), int(tecUNFUNDED_OFFER), int(tecUNFUNDED_PAYMENT)}
)