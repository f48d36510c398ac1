# forumbackend/forumbackend/urls.py

from django.contrib import admin
from django.urls import path

urlpatterns = [
    # Django Admin 後台路徑 (群組稱號設定、使用者稱號都在這裡管理)
    path('admin/', admin.site.urls),
]
