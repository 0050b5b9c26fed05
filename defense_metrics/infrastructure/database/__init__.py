from .supabase_client import SupabaseClient
from .supabase_store import SupabaseMetricsStore
