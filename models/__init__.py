from models.room import Room, RoomStatus, RoomType, DisplayRoom, FloorLayout
from models.tenancy import Resident, Contract, RoomWithContract
from models.finance import Payment, PaymentStatus, Expense, ExpenseCategory
from models.user import User
