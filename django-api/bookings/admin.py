from django.contrib import admin

from bookings.models import Registration, Session


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    readonly_fields = ["user_id", "created_at"]


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "instructor", "start_time", "end_time"]
    list_filter = ["category"]
    search_fields = ["title", "instructor"]
    inlines = [RegistrationInline]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["user_id", "session", "created_at"]
    list_filter = ["session__category"]
    search_fields = ["user_id"]
