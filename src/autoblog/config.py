import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper()

# --- LLM providers ---
# Names of the env vars holding the API keys; keys are read at call time.
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
BIGMODEL_API_KEY_ENV = "BIGMODEL_API_KEY"

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
)
BIGMODEL_MODEL = os.getenv("BIGMODEL_MODEL", "glm-4-flash")
BIGMODEL_BASE_URL = os.getenv(
    "BIGMODEL_BASE_URL", "https://open.bigmodel.cn/api/paas/v4/"
)

PRIMARY_PROVIDER = os.getenv("PRIMARY_PROVIDER", "gemini")
SECONDARY_PROVIDER = os.getenv("SECONDARY_PROVIDER", "bigmodel")

LLM_TIMEOUT_S = float(os.getenv("LLM_TIMEOUT_S", "60"))
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
LLM_MAX_OUTPUT_TOKENS = int(os.getenv("LLM_MAX_OUTPUT_TOKENS", "8192"))
LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "2"))
LLM_RETRY_BASE_DELAY_S = float(os.getenv("LLM_RETRY_BASE_DELAY_S", "1.0"))

# --- Blog output ---
BLOG_DIR = os.getenv("BLOG_DIR", "src/content/blog")
BLOG_LANGUAGE = os.getenv("BLOG_LANGUAGE", "ar")
HERO_IMAGE = os.getenv("HERO_IMAGE", "../../assets/blog-placeholder-3.jpg")

# Topics pool for auto-generation
TOPICS = [
    "التكنولوجيا الحديثة",
    "الذكاء الاصطناعي",
    "تطوير البرمجيات",
    "العمل عن بُعد",
    "الأمن السيبراني",
    "تعلم الآلة",
    "البيانات الضخمة",
    "الحوسبة السحابية",
    "إنترنت الأشياء",
    "البلوكتشين",
    "التسويق الرقمي",
    "تجربة المستخدم",
    "التصميم البرمجي",
    "أدوات الإنتاجية",
    "إدارة المشاريع",
    "الروبوتات",
    "الواقع الافتراضي",
    "الواقع المعزز",
    "التطبيقات الذكية",
    "تحليل البيانات",
    "Python للمبتدئين",
    "JavaScript الحديث",
    "React و Next.js",
    "Node.js",
    "قواعد البيانات",
    "Docker و Kubernetes",
    "Git و GitHub",
    "CI/CD DevOps",
    "testing البرمجي",
    "أداء التطبيقات",
    "SEO التقني",
    "Web3 و NFT",
    "العملات الرقمية",
    "التمويل اللامركزي",
    "الهوية الرقمية",
    "الخصوصية الإلكترونية",
    "الذكاء الاصطناعي التوليدي",
    "ChatGPT و النماذج اللغوية",
    "أتمتة المهام",
    "الكتابة بمساعدة AI",
]
