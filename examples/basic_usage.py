"""
Basic usage example for userledger.
"""

from userledger import RegistrationService, UserStore, validate_phone

# Initialize the store
store = UserStore("example_users.txt")
service = RegistrationService(store)

# Check a single field
accepted, reason = validate_phone("+7 899 123 45 67")
print(f"Phone accepted: {accepted} {reason}")

# Register a user
print("Registering first user...")
result = service.register("Иван Петров", "34", "+7 999 123 45 67", "ivan@mail.ru")
if result.success:
    print(f"✅ Registered: {result.record.full_name} ({result.record.phone})")

# Same email, different name: rejected as duplicate
print("\nRegistering second user...")
result = service.register("Anna Smith", "28", "+79990000001", "IVAN@MAIL.RU")
if result.duplicate:
    print("⚠️  Duplicate detected!")

# Invalid fields are reported per field
print("\nRegistering invalid user...")
result = service.register("Anna2", "0", "+79990000001", "anna@.ru")
for field, reason in result.errors.items():
    print(f"❌ {field}: {reason}")

print("\nStored users:")
for record in service.list_users():
    print(f"   {record.full_name} | {record.phone} | {record.email} | {record.age}")
